# itemguard/config/config_guard.py
"""
Configuration for the inventory guard (oversized item removal on join).
"""

# --- Config Keys ---
GUARD_CONFIG_SECTION = "NbtBanItemChecker"
GUARD_MAX_ITEM_SIZE_KEY = "maxItemSizeAllowed"
GUARD_RECURSION_DEPTH_KEY = "containerRecursionDepth"
GUARD_ENABLED_KEY = "enabled"

# --- Defaults ---
GUARD_DEFAULT_MAX_ITEM_SIZE = 50000  # Bytes of canonical encoding
GUARD_DEFAULT_RECURSION_DEPTH = 1    # Contents of a container, never contents of contents
GUARD_TEXT_ENCODING = "utf-8"

# --- Messages ---
GUARD_DELETED_ITEM_MESSAGE_KEY = "nbtPatch_deleted_item"
GUARD_LOG_SOURCE = "InventoryGuard"

# --- Outcome Decisions ---
DECISION_KEPT = "kept"
DECISION_REMOVED = "removed"
