# smoke_test.py
"""
Smoke test minimal, sans pause de mixage.
Valide :
- création d'un fruit de chaque variété,
- remplissage du blender (avec un doublon),
- mixage + rapport,
- blender vide à la fin.
"""

from smoothieops.core.blender import Blender
from smoothieops.domain.fruits import get_all_fruits


def main():
    blender = Blender(blend_seconds=0)

    fruits = get_all_fruits()
    print(f"✔ Catalogue : {len(fruits)} fruits.")
    for fruit in fruits + fruits[:1]:
        blender.add(fruit)

    print(f"✔ Dans le blender : {len(blender.contents)} fruits")
    blended = blender.start()

    print("\n=== Résumé Smoke Test ===")
    print(f"Mixés       : {', '.join(blended)}")
    print(f"Vide        : {blender.is_empty()}")
    print("=========================\n")


if __name__ == "__main__":
    main()
