# smoothieops/domain/fruits.py
"""
Définitions de base des fruits (modèle Fruit + catalogue).

Le catalogue est lu depuis ``data/fruits_catalog.json`` et validé par
Pydantic : chaque membre de ``FruitKind`` doit y avoir une entrée.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, RootModel, ValidationError

from smoothieops.data import CATALOG_PATH
from smoothieops.domain.types import FruitKind
from smoothieops.utils import load_and_validate


class FruitSpec(BaseModel):
    """Nom affiché et modèle de préparation d'une variété de fruit."""

    name: str
    preparation_template: str


class FruitCatalogModel(RootModel[Dict[FruitKind, FruitSpec]]):
    pass


class Fruit(BaseModel):
    """Un fruit prêt à passer au blender (valeur immuable)."""

    model_config = ConfigDict(frozen=True)

    kind: FruitKind
    name: str
    preparation_template: str

    def prepare(self) -> str:
        return self.preparation_template.format(name=self.name)

    @classmethod
    def from_kind(cls, kind: FruitKind) -> "Fruit":
        fruit_spec = CATALOG[kind]
        return cls(
            kind=kind,
            name=fruit_spec.name,
            preparation_template=fruit_spec.preparation_template,
        )


def load_fruit_catalog(data_path=CATALOG_PATH) -> Dict[FruitKind, FruitSpec]:
    """Charge le catalogue des fruits et vérifie qu'il couvre tout ``FruitKind``.

    Lève
    ----
    FileNotFoundError
        Si le fichier n'existe pas.
    ValueError
        Si une entrée est invalide ou si une variété n'a pas d'entrée.
    """
    try:
        catalog = load_and_validate(data_path, FruitCatalogModel).root
    except ValidationError as e:
        raise ValueError(f"Invalid fruit catalog {data_path}: {e}")

    missing = [kind.value for kind in FruitKind if kind not in catalog]
    if missing:
        raise ValueError(f"Fruit catalog {data_path} has no entry for: {missing}")

    # ordre de l'enum, pas celui du fichier
    return {kind: catalog[kind] for kind in FruitKind}


CATALOG = load_fruit_catalog()


def get_all_fruits() -> List[Fruit]:
    """Retourne un fruit de chaque variété, dans l'ordre du catalogue."""
    return [Fruit.from_kind(kind) for kind in CATALOG]
