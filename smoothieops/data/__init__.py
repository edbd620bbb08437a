"""
Point d'entrée data : tables statiques de la simulation (catalogue des
fruits en JSON, paramètres du blender).
"""

from pathlib import Path

CATALOG_PATH = Path(__file__).parent / "fruits_catalog.json"
