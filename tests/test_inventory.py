# tests/test_inventory.py
from tests.fixtures import GuardTestBase, make_container, make_item
from itemguard.items.container import Container
from itemguard.items.inventory import Inventory
from itemguard.items.item import Item
from itemguard.items.item_factory import ItemFactory

class TestInventorySlots(GuardTestBase):

    def test_clear_slot_returns_removed_item(self):
        inventory = Inventory(max_slots=3)
        sword = Item(item_type="IRON_SWORD", stackable=False)
        inventory.set_slot(1, sword)

        self.assertIs(inventory.clear_slot(1), sword)
        self.assertIsNone(inventory.clear_slot(1))
        self.assertIsNone(inventory.clear_slot(99))
        self.assertEqual(inventory.snapshot(), [None, None, None])

    def test_similar_items_stack(self):
        inventory = Inventory(max_slots=2)
        ok, _ = inventory.add_item(Item(item_type="ARROW"), 40)
        self.assertTrue(ok)
        ok, _ = inventory.add_item(Item(item_type="ARROW"), 40)
        self.assertTrue(ok)
        self.assertEqual([slot.quantity for slot in inventory.slots], [64, 16])

    def test_different_metadata_does_not_stack(self):
        inventory = Inventory(max_slots=2)
        inventory.add_item(Item(item_type="PAPER", lore="a"))
        inventory.add_item(Item(item_type="PAPER", lore="b"))
        self.assertEqual(inventory.get_empty_slots(), 0)
        ok, msg = inventory.add_item(Item(item_type="PAPER", lore="c"))
        self.assertFalse(ok)
        self.assertIn("Not enough space", msg)

    def test_snapshot_roundtrip_keeps_containers(self):
        inventory = Inventory(max_slots=4)
        inventory.set_slot(0, make_item(300, name="Letter"))
        inventory.set_slot(2, make_container([200, 400], name="Box"))

        restored = Inventory.from_dict(inventory.to_dict())

        self.assertEqual(len(restored.slots), 4)
        self.assertIsNone(restored.get_slot(1).item)
        self.assertEqual(restored.get_slot(0).item.name, "Letter")
        box = restored.get_slot(2).item
        self.assertIsInstance(box, Container)
        self.assertEqual(len(box.get_items()), 2)
        self.assertEqual(len(box.get_contents()), box.capacity)

    def test_factory_falls_back_to_base_item(self):
        item = ItemFactory.from_dict({"type": "Spaceship", "item_type": "ELYTRA"})
        self.assertIsInstance(item, Item)
        self.assertEqual(item.item_type, "ELYTRA")
        self.assertIsNone(ItemFactory.from_dict("not a dict"))

    def test_container_add_item_respects_capacity(self):
        box = Container(capacity=1)
        self.assertTrue(box.add_item(Item(item_type="DIRT")))
        self.assertFalse(box.add_item(Item(item_type="DIRT")))
