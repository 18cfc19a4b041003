# itemguard/config/config_game.py
"""
Configuration for core server systems, file paths, and logging.
"""
import os

# --- Directories and Files ---
# config_game.py is in itemguard/config/, so we go up two levels to get to root.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DATA_DIR = os.path.join(BASE_DIR, "data")
LANG_DIR = os.path.join(DATA_DIR, "lang")

# --- Inventory Defaults ---
DEFAULT_INVENTORY_MAX_SLOTS = 41    # 36 storage + 4 armor + 1 off hand
DEFAULT_CONTAINER_SLOTS = 27

# --- Logging ---
LOG_DEFAULT_LEVEL = 1               # LogLevel.INFO
LOG_MAX_RECORDS = 500               # Structured records kept in memory
