"""
plugins/inventory_guard_plugin/config.py
Default configuration for the Inventory Guard plugin.
A config.json next to this file overrides these values.
"""

DEFAULT_CONFIG = {
    "NbtBanItemChecker": {
        # Largest allowed canonical encoding of an item, or of a container's contents, in bytes
        "maxItemSizeAllowed": 50000,
        # 1 = contents of a container only
        "containerRecursionDepth": 1,
        "enabled": True
    },
    # Language files to merge over the built-in catalogs (None = data/lang)
    "lang_dir": None
}
