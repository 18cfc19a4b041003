"""
plugins/plugin_system.py
Plugin system for the server.
Provides infrastructure for loading and managing plugins and for dispatching
session lifecycle callbacks (player join/quit) to them.
"""
import copy
import json
from typing import Dict, List, Any, Callable, Optional, Type
import importlib
import os
import inspect

from itemguard.commands.command_system import command, registered_commands, unregister_plugin_commands
from itemguard.utils.logger import Logger
from plugins.event_system import EventSystem
from plugins.service_locator import get_service_locator

PLUGIN_PATH = os.path.dirname(os.path.abspath(__file__))

class PluginManager:
    def __init__(self, world=None, command_processor=None):
        self.world = world
        self.command_processor = command_processor
        self.plugins: Dict[str, Any] = {}  # Plugin ID to instance mapping

        # Event system for loosely coupled communication
        self.event_system = EventSystem()
        # register services
        self.service_locator = get_service_locator()
        self.service_locator.register_service("event_system", self.event_system)
        self.service_locator.register_service("plugin_manager", self)

        if world:
            self.service_locator.register_service("world", world)
        if command_processor:
            self.service_locator.register_service("command_processor", command_processor)

        self.plugin_path = PLUGIN_PATH

    def discover_plugins(self) -> List[str]:
        plugin_modules = []
        for dirname in sorted(os.listdir(self.plugin_path)):
            full_dir_path = os.path.join(self.plugin_path, dirname)
            init_file = os.path.join(full_dir_path, "__init__.py")

            # Plugin packages are directories with an __init__.py file
            if os.path.isdir(full_dir_path) and os.path.exists(init_file) and dirname != "__pycache__":
                plugin_modules.append(dirname)

        Logger.debug("PluginManager", f"Discovered plugin modules: {plugin_modules}")
        return plugin_modules

    def load_plugin(self, plugin_name: str) -> bool:
        try:
            module = importlib.import_module(f"plugins.{plugin_name}")
        except ImportError as e:
            Logger.error("PluginManager", f"Error importing plugin {plugin_name}: {e}")
            return False

        # Find the plugin class
        plugin_class = None
        for name, obj in inspect.getmembers(module):
            if (inspect.isclass(obj) and
                hasattr(obj, "plugin_id") and
                obj.__module__ == module.__name__):
                plugin_class = obj
                break

        if plugin_class is None:
            Logger.warning("PluginManager", f"No plugin class found in {plugin_name}")
            return False

        return self.register_plugin(plugin_class)

    def register_plugin(self, plugin_class: Type['PluginBase']) -> bool:
        if plugin_class.plugin_id in self.plugins:
            Logger.info("PluginManager", f"Plugin {plugin_class.plugin_id} is already loaded")
            return True

        try:
            # Pass only the dependencies the constructor asks for
            params = inspect.signature(plugin_class.__init__).parameters
            available = {
                "world": self.world,
                "command_processor": self.command_processor,
                "event_system": self.event_system,
                "service_locator": self.service_locator,
            }
            kwargs = {name: value for name, value in available.items() if name in params}

            plugin = plugin_class(**kwargs)
            plugin.initialize()
        except Exception as e:
            Logger.error("PluginManager", f"Error loading plugin {plugin_class.plugin_id}: {e}")
            return False

        self.service_locator.register_service(f"plugin:{plugin.plugin_id}", plugin)
        self.plugins[plugin.plugin_id] = plugin

        Logger.info("PluginManager", f"Loaded plugin: {plugin.plugin_id}")
        self.event_system.publish("plugin_loaded", {
            "plugin_id": plugin.plugin_id,
            "plugin_name": getattr(plugin, "plugin_name", plugin.plugin_id)
        })
        return True

    def unload_plugin(self, plugin_id: str) -> bool:
        if plugin_id not in self.plugins:
            return False

        plugin = self.plugins[plugin_id]
        self._safe_call(plugin, "cleanup")

        unregister_plugin_commands(plugin_id)
        self.service_locator.unregister_service(f"plugin:{plugin_id}")
        self.plugins.pop(plugin_id)

        self.event_system.publish("plugin_unloaded", {"plugin_id": plugin_id})
        Logger.info("PluginManager", f"Unloaded plugin: {plugin_id}")
        return True

    def unload_all_plugins(self) -> None:
        for plugin_id in list(self.plugins.keys()):
            self.unload_plugin(plugin_id)

    def get_plugin(self, plugin_id: str) -> Optional[Any]:
        return self.plugins.get(plugin_id)

    def on_player_join(self, player) -> None:
        """Runs every plugin's join handler to completion before returning."""
        for plugin in list(self.plugins.values()):
            self._safe_call(plugin, "on_player_join", player)

        self.event_system.publish("player_joined", {"player": player})

    def on_player_quit(self, player) -> None:
        for plugin in list(self.plugins.values()):
            self._safe_call(plugin, "on_player_quit", player)

        self.event_system.publish("player_quit", {"player": player})

    def _safe_call(self, plugin, method_name, *args, **kwargs):
        """
        Call a plugin method if it exists, logging any error instead of raising.

        Returns:
            The result of the method call, or None if missing or an error occurred.
        """
        method = getattr(plugin, method_name, None)
        if not callable(method):
            return None

        try:
            return method(*args, **kwargs)
        except Exception as e:
            Logger.error("PluginManager", f"Error in plugin {plugin.plugin_id} {method_name}: {e}")
            return None


class PluginBase:
    plugin_id = "base_plugin"
    plugin_name = "Base Plugin"

    def __init__(self, world=None, command_processor=None, event_system=None):
        self.world = world
        self.command_processor = command_processor
        self.event_system = event_system
        self.config = self.load_config()

    def get_config_path(self) -> str:
        return os.path.join(PLUGIN_PATH, self.plugin_id, "config.json")

    def load_config(self) -> Dict[str, Any]:
        # Load defaults from config.py if it exists
        try:
            config_module = importlib.import_module(f"plugins.{self.plugin_id}.config")
            default_config = copy.deepcopy(getattr(config_module, "DEFAULT_CONFIG", {}))
        except ImportError:
            default_config = {}

        # Override with JSON if it exists
        config_path = self.get_config_path()
        if os.path.exists(config_path):
            try:
                with open(config_path, 'r', encoding="utf-8") as f:
                    user_config = json.load(f)
            except (OSError, ValueError) as e:
                Logger.error("PluginBase", f"Error loading config for {self.plugin_id}: {e}")
                return default_config

            if not isinstance(user_config, dict):
                Logger.error("PluginBase", f"Config for {self.plugin_id} must be a JSON object.")
                return default_config

            for key, value in user_config.items():
                # Sections merge key by key
                if isinstance(value, dict) and isinstance(default_config.get(key), dict):
                    default_config[key].update(value)
                else:
                    default_config[key] = value

        return default_config

    def initialize(self):
        pass

    def cleanup(self):
        pass


def register_plugin_command(plugin_id: str, name: str, handler: Callable,
                            aliases: Optional[List[str]] = None, category: str = "other",
                            help_text: str = "No help available.") -> bool:
    """
    Register a command for a plugin. Fails if another owner already holds the name.
    """
    if name in registered_commands and registered_commands[name].get("plugin_id") != plugin_id:
        return False

    command(
        name=name,
        aliases=aliases or [],
        category=category,
        help_text=help_text,
        plugin_id=plugin_id
    )(wrap_plugin_command_handler(plugin_id, handler))
    return True

def get_plugin_commands(plugin_id: str) -> List[Dict[str, Any]]:
    """Primary command entries (not aliases) registered by a plugin."""
    return [cmd_data for cmd_name, cmd_data in registered_commands.items()
            if cmd_data.get("plugin_id") == plugin_id and cmd_data["name"] == cmd_name]

def wrap_plugin_command_handler(plugin_id: str, handler: Callable) -> Callable:
    """
    Wrap a plugin command handler with error handling and plugin context.
    """
    def wrapper(args, context):
        try:
            context["plugin_id"] = plugin_id
            return handler(args, context)
        except Exception as e:
            Logger.error("PluginCommand", f"Error in {plugin_id} command: {e}")
            return f"Error in plugin command: {str(e)}"

    return wrapper
