# itemguard/items/inventory/slot.py
from typing import Any, Dict, Optional, Tuple
from itemguard.items.item import Item
from itemguard.items.item_factory import ItemFactory

class InventorySlot:
    """Represents a single slot in an inventory that can hold one item stack."""

    def __init__(self, item: Optional[Item] = None, quantity: int = 1):
        self.item = item
        # Ensure quantity matches stackability
        if item and not item.stackable:
             self.quantity = 1
        else:
             self.quantity = quantity if item else 0 # Quantity is 0 if no item

    def is_empty(self) -> bool:
        return self.item is None

    def add(self, item: Item, quantity: int = 1) -> int:
        """Adds quantity to existing stack or sets new item. Returns amount added."""
        if not self.item:
            self.item = item
            self.quantity = min(quantity, item.max_stack) if item.stackable else 1
            return self.quantity

        if self.item.stackable and self.item.is_similar(item):
            added = min(quantity, self.item.max_stack - self.quantity)
            self.quantity += added
            return added

        return 0 # Could not add to this slot

    def remove(self, quantity: int = 1) -> Tuple[Optional[Item], int]:
        """Removes quantity, clears slot if quantity becomes zero."""
        if not self.item:
            return None, 0

        quantity_to_remove = min(self.quantity, quantity)
        removed_item = self.item

        self.quantity -= quantity_to_remove

        if self.quantity <= 0:
            self.item = None # Clear the slot fully
            self.quantity = 0

        return removed_item, quantity_to_remove

    def clear(self) -> Tuple[Optional[Item], int]:
        """Empties the slot regardless of stack size."""
        return self.remove(self.quantity)

    def to_dict(self) -> Optional[Dict[str, Any]]:
        if not self.item:
            return None
        return {"item": self.item.to_dict(), "quantity": self.quantity}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'InventorySlot':
        if not data or not data.get("item"):
            return cls()
        item = ItemFactory.from_dict(data["item"])
        return cls(item, data.get("quantity", 1 if item else 0))
