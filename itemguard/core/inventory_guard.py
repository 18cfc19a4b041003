# itemguard/core/inventory_guard.py
"""
InventoryGuard: the oversized-item pass run once per player join.

snapshot -> evaluate (ThresholdEnforcer) -> remove, log and notify (EnforcementExecutor)

The pass is synchronous and never raises into the join flow; unexpected errors
are logged and the affected slots stay where they are.
"""
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from itemguard.config import (
    GUARD_CONFIG_SECTION, GUARD_DEFAULT_MAX_ITEM_SIZE, GUARD_DEFAULT_RECURSION_DEPTH,
    GUARD_ENABLED_KEY, GUARD_LOG_SOURCE, GUARD_MAX_ITEM_SIZE_KEY, GUARD_RECURSION_DEPTH_KEY
)
from itemguard.core.container_visitor import ContainerRecursionVisitor
from itemguard.core.enforcement_executor import EnforcementExecutor, Notifier
from itemguard.core.size_evaluator import SizeEvaluator
from itemguard.core.threshold_enforcer import EnforcementOutcome, ThresholdEnforcer
from itemguard.utils.logger import Logger

if TYPE_CHECKING:
    from itemguard.player.core import Player


def _read_int(section: Dict[str, Any], key: str, default: int, minimum: int) -> int:
    value = section.get(key, default)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        if key in section:
            Logger.warning(GUARD_LOG_SOURCE, f"Invalid value {value!r} for {GUARD_CONFIG_SECTION}.{key}; using {default}.")
        return default
    return value


def read_guard_settings(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Extract and validate the guard options from a plugin config dict."""
    section = (config or {}).get(GUARD_CONFIG_SECTION, {})
    if not isinstance(section, dict):
        Logger.warning(GUARD_LOG_SOURCE, f"Config section {GUARD_CONFIG_SECTION} is not a mapping; using defaults.")
        section = {}

    enabled = section.get(GUARD_ENABLED_KEY, True)
    if not isinstance(enabled, bool):
        Logger.warning(GUARD_LOG_SOURCE, f"Invalid value {enabled!r} for {GUARD_CONFIG_SECTION}.{GUARD_ENABLED_KEY}; using True.")
        enabled = True

    return {
        "max_item_size": _read_int(section, GUARD_MAX_ITEM_SIZE_KEY, GUARD_DEFAULT_MAX_ITEM_SIZE, 0),
        "recursion_depth": _read_int(section, GUARD_RECURSION_DEPTH_KEY, GUARD_DEFAULT_RECURSION_DEPTH, 1),
        "enabled": enabled,
    }


class InventoryGuard:
    """Removes items whose serialized metadata is larger than max_item_size bytes."""

    def __init__(self, max_item_size: int = GUARD_DEFAULT_MAX_ITEM_SIZE,
                 recursion_depth: int = GUARD_DEFAULT_RECURSION_DEPTH,
                 enabled: bool = True, notifier: Optional[Notifier] = None):
        self.evaluator = SizeEvaluator()
        self.visitor = ContainerRecursionVisitor(self.evaluator, max_depth=recursion_depth)
        self.enforcer = ThresholdEnforcer(max_item_size, self.evaluator, self.visitor)
        self.executor = EnforcementExecutor(notifier)
        self.enabled = enabled

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]], notifier: Optional[Notifier] = None) -> 'InventoryGuard':
        settings = read_guard_settings(config)
        return cls(settings["max_item_size"], settings["recursion_depth"], settings["enabled"], notifier)

    @property
    def max_item_size(self) -> int:
        return self.enforcer.threshold

    def evaluate(self, player: 'Player') -> List[EnforcementOutcome]:
        """Decisions for the player's current inventory, without touching it."""
        return self.enforcer.evaluate(player.inventory.snapshot(), player.name)

    def run_pass(self, player: 'Player') -> List[EnforcementOutcome]:
        """
        Scan the player's inventory and remove every oversized item or container.

        Returns:
            The outcomes that were applied (one per removed slot).
        """
        if not self.enabled:
            return []
        try:
            outcomes = self.evaluate(player)
            return self.executor.execute(player, outcomes)
        except Exception as e:
            Logger.error(GUARD_LOG_SOURCE, f"Inventory pass for {getattr(player, 'name', player)} failed: {e}")
            return []

    def on_player_join(self, player: 'Player') -> List[EnforcementOutcome]:
        return self.run_pass(player)
