# tests/fixtures.py
import unittest
import sys
import os
from typing import List, Optional, Sequence

# Get the absolute path to the project root (one level up from tests/)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Insert root into sys.path so we can import 'itemguard' and 'plugins'
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from itemguard.config import GUARD_LOG_SOURCE
from itemguard.core.size_evaluator import SizeEvaluator
from itemguard.items.container import Container
from itemguard.items.inventory import Inventory
from itemguard.items.item import Item
from itemguard.player.core import Player
from itemguard.utils.localization import Localizer, set_localizer
from itemguard.utils.logger import Logger, LogLevel
from itemguard.world.world import World
from plugins.inventory_guard_plugin import InventoryGuardPlugin
from plugins.plugin_system import PluginManager
from plugins.service_locator import ServiceLocator

_EVALUATOR = SizeEvaluator()

def make_item(size: int, name: Optional[str] = None, item_type: str = "DIAMOND_SWORD") -> Item:
    """An item whose canonical encoding is exactly `size` bytes (padded through its lore)."""
    item = Item(item_type=item_type, name=name, lore="")
    padding = size - _EVALUATOR.measure(item)
    if padding < 0:
        raise ValueError(f"Cannot build an item of {size} bytes; minimum is {size - padding}")
    item.properties["lore"] = "x" * padding
    return item

def make_container(item_sizes: Sequence[int], name: Optional[str] = None,
                   item_type: str = "SHULKER_BOX") -> Container:
    contents = [make_item(size, item_type="PAPER") for size in item_sizes]
    return Container(item_type=item_type, name=name, contents=contents)

class GuardTestBase(unittest.TestCase):
    """Base class for guard tests: a world with the guard plugin loaded and one offline player."""

    def setUp(self):
        """Runs before EVERY test function."""
        # 1. Fresh process-wide state
        Logger.clear_records()
        Logger.set_level(LogLevel.INFO)
        set_localizer(Localizer())
        ServiceLocator.reset_instance()

        # 2. World and plugins
        self.world = World("test_world")
        self.plugin_manager = PluginManager(world=self.world, command_processor=self.world.command_processor)
        self.world.attach_plugin_manager(self.plugin_manager)
        self.assertTrue(self.plugin_manager.register_plugin(InventoryGuardPlugin))
        self.guard_plugin = self.plugin_manager.get_plugin(InventoryGuardPlugin.plugin_id)

        # 3. Player with a small, empty inventory
        self.player = Player("Steve", inventory=Inventory(max_slots=9))

    def tearDown(self):
        self.plugin_manager.unload_all_plugins()
        set_localizer(None)

    def removal_records(self) -> List[dict]:
        return [record for record in Logger.get_records(source=GUARD_LOG_SOURCE, level=LogLevel.WARNING)
                if "kind" in record["fields"]]

    def assertMessageContains(self, substring: str):
        """Check that the player received a message containing the text."""
        all_text = "\n".join(self.player.messages)
        self.assertIn(substring, all_text, f"Expected message '{substring}' not found in player messages.")
