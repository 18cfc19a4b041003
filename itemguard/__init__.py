"""
itemguard
Inventory sanitation for shared multiplayer worlds.
Removes items whose serialized metadata exceeds a configured byte cap when a player joins.
"""

__version__ = "0.1.0"
