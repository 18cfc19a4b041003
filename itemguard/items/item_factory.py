# itemguard/items/item_factory.py
from typing import Any, Dict, Optional, Type

from itemguard.items.item import Item
from itemguard.items.container import Container
from itemguard.utils.logger import Logger

ITEM_CLASS_MAP: Dict[str, Type[Item]] = {
     "Item": Item,
     "Container": Container,
}

class ItemFactory:
    """Factory class for creating items from data."""

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Optional[Item]:
        if not isinstance(data, dict):
            Logger.warning("ItemFactory", f"Cannot build item from {type(data).__name__}.")
            return None

        item_class_name = data.get("type", "Item")
        item_class = ITEM_CLASS_MAP.get(item_class_name)
        if not item_class:
            Logger.warning("ItemFactory", f"Unknown item class '{item_class_name}' in from_dict. Using base Item.")
            item_class = Item
        return item_class.from_dict(data)
