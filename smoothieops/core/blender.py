import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, List

from smoothieops.data.blender_params import BLEND_SECONDS
from smoothieops.domain.fruits import Fruit
from smoothieops.ui.affichage import (
    print_blend_report,
    print_blend_started,
    print_empty_blender,
    print_fruit_added,
)

logger = logging.getLogger(__name__)


@dataclass
class Blender:
    """
    Le blender partagé de la simulation.

    Une seule instance est construite au démarrage et passée à qui en a
    besoin. Le contenu n'est modifié que par ``add`` et ``start`` ; toutes
    les opérations passent par le même verrou.

    - blend_seconds : durée de la pause bloquante pendant ``start`` (0 en test)
    - sleep : fonction de pause, ``time.sleep`` par défaut
    """

    blend_seconds: float = BLEND_SECONDS
    sleep: Callable[[float], None] = time.sleep
    _contents: List[Fruit] = field(default_factory=list, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.blend_seconds < 0:
            raise ValueError(f"blend_seconds must be >= 0, got {self.blend_seconds}")

    def add(self, fruit: Fruit) -> None:
        with self._lock:
            print_fruit_added(fruit)
            self._contents.append(fruit)
            logger.debug("Added %s (%d in blender)", fruit.name, len(self._contents))

    @property
    def contents(self) -> List[Fruit]:
        """Copie du contenu, dans l'ordre d'ajout."""
        with self._lock:
            return list(self._contents)

    def is_empty(self) -> bool:
        with self._lock:
            return not self._contents

    def start(self) -> List[str]:
        """
        Mixe le contenu puis vide le blender.

        Si le blender est vide : message d'avertissement, rien ne change.
        Sinon : pause de ``blend_seconds`` (bloquante, sans annulation),
        rapport listant chaque fruit dans l'ordre d'ajout, puis remise à zéro.

        Retourne les noms mixés (liste vide si rien n'a été mixé).
        """
        with self._lock:
            if not self._contents:
                print_empty_blender()
                return []

            print_blend_started(self.blend_seconds)
            logger.debug(
                "Blending %d fruits for %s seconds",
                len(self._contents),
                self.blend_seconds,
            )
            self.sleep(self.blend_seconds)

            blended_names = [fruit.name for fruit in self._contents]
            print_blend_report(blended_names)
            self._contents.clear()
            logger.debug("Blend finished: %s", blended_names)
            return blended_names
