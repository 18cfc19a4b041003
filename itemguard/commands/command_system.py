"""
itemguard/commands/command_system.py
Command registry for operator and player commands.
Plugins register their commands here through plugins.plugin_system.register_plugin_command.
"""
from typing import Callable, List, Dict, Any, Optional
from functools import wraps

from itemguard.config import FORMAT_ERROR, FORMAT_RESET

# Dictionary to store all registered commands
registered_commands: Dict[str, Dict[str, Any]] = {}
command_groups: Dict[str, List[Dict[str, Any]]] = {
    "inventory": [],
    "admin": [],
    "system": [],
    "other": []
}

def command(name: str, aliases: Optional[List[str]] = None, category: str = "other",
           help_text: str = "No help available.", plugin_id: Optional[str] = None):
    """
    Decorator for registering commands.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        cmd_data = {
            "name": name,
            "aliases": aliases or [],
            "handler": wrapper,
            "help_text": help_text,
            "category": category,
            "plugin_id": plugin_id
        }
        wrapper._command_info = {k: v for k, v in cmd_data.items() if k != "handler"}

        # Store in main commands dictionary by name and by each alias
        registered_commands[name] = cmd_data
        for alias in aliases or []:
            registered_commands[alias] = cmd_data

        if category in command_groups:
            command_groups[category].append(cmd_data)
        else:
            command_groups["other"].append(cmd_data)

        return wrapper
    return decorator

def get_registered_commands() -> Dict[str, Dict[str, Any]]:
    return registered_commands

def unregister_command(name: str) -> bool:
    """
    Unregister a command (and its aliases) by name or alias.

    Returns:
        True if the command was unregistered, False otherwise.
    """
    if name not in registered_commands:
        return False

    cmd_data = registered_commands[name]
    cmd_name = cmd_data["name"]

    registered_commands.pop(cmd_name, None)
    for alias in cmd_data["aliases"]:
        registered_commands.pop(alias, None)

    category = cmd_data["category"] if cmd_data["category"] in command_groups else "other"
    command_groups[category] = [c for c in command_groups[category] if c["name"] != cmd_name]

    return True

def unregister_plugin_commands(plugin_id: str) -> int:
    """
    Unregister all commands for a plugin.

    Returns:
        Number of commands unregistered.
    """
    if not plugin_id:
        return 0

    plugin_commands = [cmd_name for cmd_name, cmd_data in registered_commands.items()
                       if cmd_data.get("plugin_id") == plugin_id and cmd_data["name"] == cmd_name]

    count = 0
    for cmd_name in plugin_commands:
        if unregister_command(cmd_name):
            count += 1
    return count

class CommandProcessor:
    """Processes input text and dispatches to the registered handler."""

    def process_input(self, text: str, context: Optional[Dict[str, Any]] = None) -> str:
        text = text.strip()
        if not text:
            return ""
        parts = text.split()
        command_word = parts[0].lower()
        args = parts[1:]

        if command_word in registered_commands:
            cmd = registered_commands[command_word]
            if context is None:
                context = {}
            context['executed_command_name'] = cmd.get('name', command_word)
            return cmd["handler"](args, context)

        return f"{FORMAT_ERROR}Unknown command: {command_word}{FORMAT_RESET}"
