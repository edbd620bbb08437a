"""
SmoothieOps package

A small smoothie-making simulation: fruits are created by name, dropped
into a blender and blended after a (cosmetic) delay.  The package keeps
the domain objects, the data tables, the creation rules, the blender
engine and the console output in separate subpackages.
"""

import logging

# Console output goes through ui.affichage; the log trace stays silent
# unless the application installs its own handler.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["core", "domain", "data", "rules", "ui"]
