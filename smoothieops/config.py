"""
Configuration d'une session SmoothieOps.

Pas de source externe : les valeurs par défaut viennent de
``data/blender_params.py`` et les appelants (tests compris) passent leur
propre ``SmoothieConfig``.
"""

from typing import Tuple

from pydantic import BaseModel, Field

from smoothieops.data.blender_params import BLEND_SECONDS, DEFAULT_BASKET


class SmoothieConfig(BaseModel):
    basket: Tuple[str, ...] = Field(
        default=DEFAULT_BASKET, description="Noms de fruits demandés, dans l'ordre"
    )
    blend_seconds: float = Field(
        default=BLEND_SECONDS, ge=0, description="Durée de la pause de mixage"
    )
