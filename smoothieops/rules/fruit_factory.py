"""Création des fruits à partir de leur nom.

La correspondance est insensible à la casse mais exacte : le nom est mis en
minuscules puis comparé aux clés de ``FruitKind``.  Chaque appel construit
une nouvelle instance ; rien n'est mis en cache.
"""

import logging
from typing import List

from smoothieops.domain.fruits import CATALOG, Fruit
from smoothieops.domain.types import FruitKind
from smoothieops.exceptions import UnknownIngredientError

logger = logging.getLogger(__name__)

_FRUIT_KINDS_BY_KEY = {kind.value: kind for kind in FruitKind}


def available_fruits() -> List[str]:
    """Clés reconnues par ``create_fruit``, dans l'ordre du catalogue."""
    return [kind.value for kind in CATALOG]


def create_fruit(raw_name: str) -> Fruit:
    """
    Crée un fruit à partir de son nom.

    Paramètres
    ----------
    raw_name : str
        Nom demandé (ex. "strawberry", "Mango").

    Retour
    ------
    Fruit
        Une nouvelle instance de la variété correspondante.

    Lève
    ----
    UnknownIngredientError
        Si le nom (une fois en minuscules) n'est pas au catalogue. Le message
        reprend ``raw_name`` tel quel.
    """
    kind = _FRUIT_KINDS_BY_KEY.get(raw_name.lower())
    if kind is None:
        logger.debug("Unknown fruit requested: %r", raw_name)
        raise UnknownIngredientError(raw_name)

    fruit = Fruit.from_kind(kind)
    logger.debug("Created %s from %r", fruit.name, raw_name)
    return fruit
