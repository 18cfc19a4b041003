# itemguard/items/item.py
from typing import Any, Dict, Optional
from itemguard.game_object import GameObject

class Item(GameObject):
    """
    Base class for all items.

    `item_type` is the host's type identifier (e.g. "DIAMOND_SWORD"), `name` is the
    optional custom display name, and `properties` holds the attached metadata
    (enchantments, lore, book pages, ...).
    """

    def __init__(self, item_type: str = "STONE", obj_id: Optional[str] = None,
                 name: Optional[str] = None, description: str = "",
                 stackable: bool = True, max_stack: int = 64,
                 **kwargs):
        super().__init__(obj_id, name, description)
        self.item_type = item_type
        self.stackable = stackable
        self.max_stack = max_stack if stackable else 1

        # Everything else is metadata
        skip_keys = {"type", "item_type", "name", "description", "obj_id", "id", "world"}
        for key, kwarg_value in kwargs.items():
            if key not in skip_keys:
                self.update_property(key, kwarg_value)

    def has_display_name(self) -> bool:
        return isinstance(self.name, str) and bool(self.name.strip())

    def is_similar(self, other: 'Item') -> bool:
        """Two items stack when type, display name and metadata all match."""
        return (isinstance(other, Item)
                and type(other) is type(self)
                and other.item_type == self.item_type
                and other.name == self.name
                and other.properties == self.properties)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["item_type"] = self.item_type
        data["stackable"] = self.stackable
        data["max_stack"] = self.max_stack
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Item':
        item = cls(
            item_type=data.get("item_type", "STONE"),
            obj_id=data.get("obj_id") or data.get("id"),
            name=data.get("name"),
            description=data.get("description", ""),
            stackable=data.get("stackable", True),
            max_stack=data.get("max_stack", 64),
        )
        item.properties = dict(data.get("properties", {}))
        return item

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.item_type} id={self.obj_id!r} name={self.name!r}>"
