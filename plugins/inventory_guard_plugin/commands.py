"""
plugins/inventory_guard_plugin/commands.py
Command module for the Inventory Guard plugin.
"""
from itemguard.utils.localization import get_localizer
from plugins.plugin_system import register_plugin_command

def register_commands(plugin):
    """Register plugin commands."""

    def itemsize_command_handler(args, context):
        """Report the measured size of every occupied slot of the calling player."""
        player = context.get("player")
        if player is None:
            return "No player in context."

        localizer = get_localizer()
        guard = plugin.guard
        outcomes = guard.evaluate(player)
        if not outcomes:
            return localizer.format(player.locale, "guard_inventory_empty")

        lines = [localizer.format(player.locale, "guard_item_size_header", guard.max_item_size)]
        for outcome in outcomes:
            lines.append(localizer.format(player.locale, "guard_item_size_line",
                                          outcome.slot_index, outcome.label, outcome.size_bytes))
        return "\n".join(lines)

    def guardreload_command_handler(args, context):
        """Re-read the plugin configuration and rebuild the guard."""
        plugin.reload_config()
        player = context.get("player")
        locale = player.locale if player is not None else None
        return get_localizer().format(locale, "guard_config_reloaded", plugin.guard.max_item_size)

    register_plugin_command(
        plugin.plugin_id,
        "itemsize",
        itemsize_command_handler,
        aliases=["nbtsize"],
        category="inventory",
        help_text="Show the serialized size of each item in your inventory."
    )

    register_plugin_command(
        plugin.plugin_id,
        "guardreload",
        guardreload_command_handler,
        category="admin",
        help_text="Reload the inventory guard configuration."
    )
