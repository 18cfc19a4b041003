# itemguard/world/world.py
from typing import Dict, Optional, TYPE_CHECKING

from itemguard.commands.command_system import CommandProcessor
from itemguard.utils.logger import Logger

if TYPE_CHECKING:
    from itemguard.player.core import Player
    from plugins.plugin_system import PluginManager


class World:
    """
    Shared world: tracks online players and drives their session lifecycle.
    Join and quit are dispatched synchronously to the plugin manager.
    """

    def __init__(self, name: str = "world"):
        self.name = name
        self.players: Dict[str, 'Player'] = {}
        self.command_processor = CommandProcessor()
        self.plugin_manager: Optional['PluginManager'] = None

    def attach_plugin_manager(self, plugin_manager: 'PluginManager') -> None:
        self.plugin_manager = plugin_manager

    def player_join(self, player: 'Player') -> None:
        """Register the player and run every join handler before returning."""
        if player.obj_id in self.players:
            Logger.warning("World", f"{player.name} is already online.")
            return

        self.players[player.obj_id] = player
        player.world = self
        player.is_online = True
        Logger.info("World", f"{player.name} joined {self.name}.")

        if self.plugin_manager:
            self.plugin_manager.on_player_join(player)

    def player_quit(self, player: 'Player') -> None:
        if self.players.pop(player.obj_id, None) is None:
            return
        player.is_online = False
        Logger.info("World", f"{player.name} left {self.name}.")

        if self.plugin_manager:
            self.plugin_manager.on_player_quit(player)

        player.world = None

    def execute_command(self, player: 'Player', text: str) -> str:
        return self.command_processor.process_input(text, {"player": player, "world": self})
