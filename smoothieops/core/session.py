from typing import List, Sequence, Tuple

from pydantic import BaseModel

from smoothieops.core.blender import Blender
from smoothieops.exceptions import UnknownIngredientError
from smoothieops.rules.fruit_factory import available_fruits, create_fruit
from smoothieops.ui.affichage import (
    print_blender_contents,
    print_fruit_error,
    print_ready_for_next_batch,
    print_welcome,
)


class SessionResult(BaseModel):
    """Résumé d'une session : ce qui a été demandé, ajouté, refusé et mixé."""

    requested: Tuple[str, ...]
    added: List[str]
    rejected: List[str]
    blended: List[str]
    ready_for_next_batch: bool


def run_session(blender: Blender, basket: Sequence[str]) -> SessionResult:
    """Remplit le blender avec le panier demandé puis lance le mixage.

    Un nom inconnu affiche une erreur et n'interrompt pas le panier.
    Le panier lui-même n'est jamais modifié.
    """
    requested = tuple(basket)
    print_welcome(requested, available_fruits())

    added: List[str] = []
    rejected: List[str] = []
    for raw_name in requested:
        try:
            fruit = create_fruit(raw_name)
        except UnknownIngredientError as e:
            print_fruit_error(str(e))
            rejected.append(raw_name)
            continue
        blender.add(fruit)
        added.append(fruit.name)

    print_blender_contents(blender.contents)

    blended = blender.start()

    ready = blender.is_empty()
    if ready:
        print_ready_for_next_batch()

    return SessionResult(
        requested=requested,
        added=added,
        rejected=rejected,
        blended=blended,
        ready_for_next_batch=ready,
    )
