# tests/test_guard_plugin.py
import json
import os
import tempfile
from unittest.mock import patch
from tests.fixtures import GuardTestBase, make_item
from itemguard.commands.command_system import get_registered_commands
from itemguard.player.core import Player
from plugins.event_system import EventSystem
from plugins.inventory_guard_plugin import InventoryGuardPlugin
from plugins.plugin_system import get_plugin_commands

class TestInventoryGuardPlugin(GuardTestBase):

    def setUp(self):
        super().setUp()
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.config_path = os.path.join(self.tmp_dir.name, "config.json")

    def tearDown(self):
        super().tearDown()
        self.tmp_dir.cleanup()

    def write_config(self, data):
        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(data, f)

    def test_plugin_uses_default_limit(self):
        self.assertEqual(self.guard_plugin.guard.max_item_size, 50000)
        self.assertEqual(self.guard_plugin.guard.visitor.max_depth, 1)

    def test_plugin_is_discoverable(self):
        self.assertIn("inventory_guard_plugin", self.plugin_manager.discover_plugins())
        self.plugin_manager.unload_plugin(InventoryGuardPlugin.plugin_id)
        self.assertIsNone(self.plugin_manager.get_plugin(InventoryGuardPlugin.plugin_id))

        self.assertTrue(self.plugin_manager.load_plugin("inventory_guard_plugin"))
        self.assertIsNotNone(self.plugin_manager.get_plugin(InventoryGuardPlugin.plugin_id))

    def test_commands_registered_and_removed(self):
        names = {cmd["name"] for cmd in get_plugin_commands(InventoryGuardPlugin.plugin_id)}
        self.assertEqual(names, {"itemsize", "guardreload"})

        self.plugin_manager.unload_plugin(InventoryGuardPlugin.plugin_id)
        self.assertNotIn("itemsize", get_registered_commands())
        self.assertNotIn("nbtsize", get_registered_commands())

    def test_join_event_is_published_after_the_pass(self):
        seen = []
        self.plugin_manager.event_system.subscribe(
            "player_joined", lambda event, data: seen.append(data["player"].inventory.get_items()))
        self.player.inventory.set_slot(0, make_item(60000))

        self.world.player_join(self.player)

        self.assertEqual(seen, [[]])
        self.assertTrue(self.player.is_online)

    def test_failing_join_handler_does_not_block_join(self):
        seen = []
        self.plugin_manager.event_system.subscribe("player_joined", lambda event, data: seen.append(data["player"]))

        with patch.object(self.guard_plugin, "on_player_join", side_effect=RuntimeError("boom")):
            self.world.player_join(self.player)

        self.assertEqual(seen, [self.player])
        self.assertTrue(self.player.is_online)
        self.assertFalse(hasattr(self.plugin_manager, "hooks"))

    def test_rejoin_while_online_is_ignored(self):
        self.world.player_join(self.player)
        self.player.inventory.set_slot(0, make_item(60000))
        self.world.player_join(self.player)
        self.assertEqual(len(self.player.inventory.get_items()), 1)

        self.world.player_quit(self.player)
        self.assertFalse(self.player.is_online)
        self.world.player_join(self.player)
        self.assertEqual(self.player.inventory.get_items(), [])

    def test_itemsize_command_reports_without_removing(self):
        self.player.inventory.set_slot(0, make_item(1234, name="Note"))
        self.player.inventory.set_slot(3, make_item(60000, name="Huge"))

        output = self.world.execute_command(self.player, "itemsize")

        self.assertIn("limit 50000 bytes", output)
        self.assertIn("Slot 0: Note - 1234 bytes", output)
        self.assertIn("Slot 3: Huge - 60000 bytes", output)
        self.assertEqual(len(self.player.inventory.get_items()), 2)

    def test_itemsize_command_on_empty_inventory(self):
        output = self.world.execute_command(self.player, "nbtsize")
        self.assertEqual(output, "Your inventory is empty.")

    def test_json_config_overrides_defaults(self):
        self.write_config({"NbtBanItemChecker": {"maxItemSizeAllowed": 2000}})
        with patch.object(InventoryGuardPlugin, "get_config_path", return_value=self.config_path):
            plugin = InventoryGuardPlugin()

        self.assertEqual(plugin.guard.max_item_size, 2000)
        # Keys missing from the file keep their defaults
        self.assertEqual(plugin.config["NbtBanItemChecker"]["containerRecursionDepth"], 1)
        self.assertTrue(plugin.guard.enabled)

    def test_broken_json_config_uses_defaults(self):
        with open(self.config_path, "w", encoding="utf-8") as f:
            f.write("{not json")
        with patch.object(InventoryGuardPlugin, "get_config_path", return_value=self.config_path):
            plugin = InventoryGuardPlugin()
        self.assertEqual(plugin.guard.max_item_size, 50000)

    def test_limit_is_fixed_until_reload(self):
        with patch.object(InventoryGuardPlugin, "get_config_path", return_value=self.config_path):
            self.write_config({"NbtBanItemChecker": {"maxItemSizeAllowed": 50000}})
            plugin = InventoryGuardPlugin()
            self.write_config({"NbtBanItemChecker": {"maxItemSizeAllowed": 1000}})

            item = make_item(5000)
            self.player.inventory.set_slot(0, item)
            self.assertEqual(plugin.on_player_join(self.player), [])

            plugin.reload_config()
            self.assertEqual(plugin.guard.max_item_size, 1000)
            self.assertEqual(len(plugin.on_player_join(self.player)), 1)

    def test_guardreload_command(self):
        self.write_config({"NbtBanItemChecker": {"maxItemSizeAllowed": 777}})
        with patch.object(InventoryGuardPlugin, "get_config_path", return_value=self.config_path):
            output = self.world.execute_command(self.player, "guardreload")
        self.assertIn("777", output)
        self.assertEqual(self.guard_plugin.guard.max_item_size, 777)

    def test_notification_uses_player_locale(self):
        player = Player("Alex", locale="es")
        player.inventory.set_slot(0, make_item(60000, name="Espada"))
        self.world.player_join(player)
        self.assertEqual(len(player.messages), 1)
        self.assertIn("fue eliminado", player.messages[0])
        self.assertIn("Espada", player.messages[0])


class TestEventSystem(GuardTestBase):

    def test_failing_subscriber_does_not_stop_others(self):
        events = EventSystem()
        received = []

        def broken(event_type, data):
            raise RuntimeError("nope")

        events.subscribe("ping", broken)
        events.subscribe("ping", lambda event_type, data: received.append(data))
        events.publish("ping", 1)

        self.assertEqual(received, [1])
        self.assertEqual(events.get_last_event_data("ping"), 1)

    def test_unsubscribe(self):
        events = EventSystem()
        received = []
        callback = lambda event_type, data: received.append(data)
        events.subscribe("ping", callback)
        events.unsubscribe("ping", callback)
        events.publish("ping", 1)
        self.assertEqual(received, [])
        self.assertNotIn("ping", events.subscribers)
