# itemguard/items/inventory/__init__.py
"""
Inventory Package.
Manages item storage in ordered slots and JSON serialization.
"""
from .slot import InventorySlot
from .core import Inventory
