# itemguard/items/inventory/persistence.py
from typing import Dict, Any, TYPE_CHECKING, cast
from itemguard.config import DEFAULT_INVENTORY_MAX_SLOTS
from .slot import InventorySlot

if TYPE_CHECKING:
    from itemguard.items.inventory.core import Inventory

class InventoryPersistenceMixin:
    """Mixin handling JSON serialization/deserialization of inventory snapshots."""

    def to_dict(self) -> Dict[str, Any]:
        # Cast self to Inventory to satisfy static analysis for attribute access
        inventory = cast('Inventory', self)
        return {
            "max_slots": inventory.max_slots,
            "slots": [slot.to_dict() for slot in inventory.slots]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Inventory':
        # Import core here to avoid circular imports
        from .core import Inventory

        max_slots = data.get("max_slots", DEFAULT_INVENTORY_MAX_SLOTS)
        inventory = Inventory(max_slots=max_slots)
        inventory.slots = [InventorySlot.from_dict(slot_data) for slot_data in data.get("slots", [])]

        # Ensure correct number of slots
        while len(inventory.slots) < inventory.max_slots:
            inventory.slots.append(InventorySlot())
        inventory.slots = inventory.slots[:inventory.max_slots]

        return inventory
