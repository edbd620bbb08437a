# Paramètres du blender (simulation)

# --- Durée ---
BLEND_SECONDS = 30.0  # pause "cosmétique" pendant le mixage

# --- Panier de départ ---
# Une fraise en double, et un kiwi que le catalogue ne connaît pas.
DEFAULT_BASKET = (
    "strawberry",
    "cherry",
    "mango",
    "raspberry",
    "strawberry",
    "kiwi",
)
