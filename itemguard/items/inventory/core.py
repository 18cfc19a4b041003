# itemguard/items/inventory/core.py
from typing import List, Optional, Tuple
from itemguard.config import DEFAULT_INVENTORY_MAX_SLOTS
from itemguard.items.item import Item
from .slot import InventorySlot
from .persistence import InventoryPersistenceMixin

class Inventory(InventoryPersistenceMixin):
    """
    Manages a collection of items in ordered inventory slots.
    Slot order is the host's slot numbering; index 0 is the first slot.
    """

    def __init__(self, max_slots: int = DEFAULT_INVENTORY_MAX_SLOTS):
        self.slots: List[InventorySlot] = [InventorySlot() for _ in range(max_slots)]
        self.max_slots = max_slots

    def add_item(self, item: Item, quantity: int = 1) -> Tuple[bool, str]:
        remaining = quantity

        # Top up similar stacks first
        if item.stackable:
            for slot in self.slots:
                if slot.item and slot.item.is_similar(item):
                    remaining -= slot.add(item, remaining)
                    if remaining <= 0:
                        return True, f"Added {item.item_type}."

        while remaining > 0:
            empty_slot = next((slot for slot in self.slots if slot.is_empty()), None)
            if not empty_slot:
                return False, f"Not enough space for the remaining {remaining} {item.item_type}."
            remaining -= empty_slot.add(item, remaining)

        return True, f"Added {item.item_type}."

    def set_slot(self, index: int, item: Optional[Item], quantity: int = 1) -> None:
        self.slots[index] = InventorySlot(item, quantity)

    def get_slot(self, index: int) -> InventorySlot:
        return self.slots[index]

    def clear_slot(self, index: int) -> Optional[Item]:
        """Remove-by-slot. Returns the item that occupied the slot, if any."""
        if index < 0 or index >= len(self.slots):
            return None
        removed_item, _ = self.slots[index].clear()
        return removed_item

    def snapshot(self) -> List[Optional[Item]]:
        """Ordered view of the slot contents (None for empty slots)."""
        return [slot.item for slot in self.slots]

    def get_empty_slots(self) -> int:
        return sum(1 for slot in self.slots if slot.is_empty())

    def get_items(self) -> List[Item]:
        return [slot.item for slot in self.slots if slot.item]
