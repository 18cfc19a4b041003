# plugins/inventory_guard_plugin/__init__.py
from typing import List

from itemguard.core.inventory_guard import InventoryGuard
from itemguard.core.threshold_enforcer import EnforcementOutcome
from itemguard.utils.localization import get_localizer
from itemguard.utils.logger import Logger
from plugins.plugin_system import PluginBase


class InventoryGuardPlugin(PluginBase):
    """Removes oversized items from a player's inventory when they join."""
    plugin_id = "inventory_guard_plugin"
    plugin_name = "Inventory Guard"

    def __init__(self, world=None, command_processor=None, event_system=None, service_locator=None):
        super().__init__(world, command_processor, event_system)
        self.service_locator = service_locator
        # Threshold is read once here; later config edits need reload_config()
        self.guard = InventoryGuard.from_config(self.config)

    def initialize(self):
        lang_dir = self.config.get("lang_dir")
        if lang_dir:
            get_localizer().load_directory(lang_dir)

        from .commands import register_commands
        register_commands(self)

        Logger.info(self.plugin_name, f"Guarding inventories with a limit of {self.guard.max_item_size} bytes.",
                    enabled=self.guard.enabled)

    def reload_config(self) -> InventoryGuard:
        self.config = self.load_config()
        self.guard = InventoryGuard.from_config(self.config)
        Logger.info(self.plugin_name, f"Configuration reloaded. Limit is {self.guard.max_item_size} bytes.")
        return self.guard

    def on_player_join(self, player) -> List[EnforcementOutcome]:
        return self.guard.on_player_join(player)
