"""
Lanceur 'python -m smoothieops'
"""

import sys
from typing import Optional

from smoothieops.config import SmoothieConfig
from smoothieops.core.blender import Blender
from smoothieops.core.session import run_session


def main(config: Optional[SmoothieConfig] = None) -> int:
    config = config or SmoothieConfig()
    # L'unique blender de la session
    blender = Blender(blend_seconds=config.blend_seconds)
    run_session(blender, config.basket)
    return 0


if __name__ == "__main__":
    sys.exit(main())
