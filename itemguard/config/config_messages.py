# itemguard/config/config_messages.py
"""
Default localized message catalogs. JSON files in LANG_DIR override these per locale.
"""
# Import directly from the module to avoid circular dependency with itemguard.config
from itemguard.config.config_display import FORMAT_CATEGORY, FORMAT_HIGHLIGHT, FORMAT_RESET

MESSAGE_PREFIX = f"{FORMAT_CATEGORY}[Guard]{FORMAT_RESET} "
DEFAULT_LOCALE = "en"

MESSAGE_CATALOGS = {
    "en": {
        "nbtPatch_deleted_item": f"An item in your inventory ({FORMAT_HIGHLIGHT}{{0}}{FORMAT_RESET}) carried too much data and was removed.",
        "guard_item_size_header": "Item sizes (limit {0} bytes):",
        "guard_item_size_line": "Slot {0}: {1} - {2} bytes",
        "guard_inventory_empty": "Your inventory is empty.",
        "guard_config_reloaded": "Inventory guard reloaded. Limit is now {0} bytes.",
    },
    "es": {
        "nbtPatch_deleted_item": f"Un objeto de tu inventario ({FORMAT_HIGHLIGHT}{{0}}{FORMAT_RESET}) contenía demasiados datos y fue eliminado.",
        "guard_item_size_header": "Tamaño de objetos (límite {0} bytes):",
        "guard_item_size_line": "Casilla {0}: {1} - {2} bytes",
        "guard_inventory_empty": "Tu inventario está vacío.",
        "guard_config_reloaded": "Guardia de inventario recargada. El límite es ahora {0} bytes.",
    },
}
