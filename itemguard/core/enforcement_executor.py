# itemguard/core/enforcement_executor.py
from typing import Callable, List, Optional, Sequence, TYPE_CHECKING

from itemguard.config import GUARD_DELETED_ITEM_MESSAGE_KEY, GUARD_LOG_SOURCE
from itemguard.core.threshold_enforcer import EnforcementOutcome
from itemguard.utils.localization import send_prefixed_localized_message
from itemguard.utils.logger import Logger

if TYPE_CHECKING:
    from itemguard.player.core import Player

Notifier = Callable[..., object]


class EnforcementExecutor:
    """Applies Removed outcomes: clears the slot, logs the removal, tells the player."""

    def __init__(self, notifier: Optional[Notifier] = None):
        self.notifier = notifier or send_prefixed_localized_message

    def execute(self, player: 'Player', outcomes: Sequence[EnforcementOutcome]) -> List[EnforcementOutcome]:
        applied: List[EnforcementOutcome] = []
        for outcome in outcomes:
            if not outcome.removed:
                continue
            try:
                removed = self.apply(player, outcome)
            except Exception as e:
                Logger.error(GUARD_LOG_SOURCE, f"Error removing slot {outcome.slot_index}; leaving it in place: {e}",
                             player=player.name, slot=outcome.slot_index)
                continue
            if not removed:
                continue

            applied.append(outcome)
            try:
                self.notifier(player, GUARD_DELETED_ITEM_MESSAGE_KEY, outcome.label)
            except Exception as e:
                Logger.error(GUARD_LOG_SOURCE, f"Slot {outcome.slot_index} removed; notification failed: {e}",
                             player=player.name, slot=outcome.slot_index)
        return applied

    def apply(self, player: 'Player', outcome: EnforcementOutcome) -> bool:
        """Clear the slot and log the removal. The player is not notified here."""
        inventory = player.inventory

        # The slot must still hold the evaluated instance
        slot = inventory.get_slot(outcome.slot_index)
        if slot.item is not outcome.item:
            Logger.warning(GUARD_LOG_SOURCE, f"Slot {outcome.slot_index} changed since evaluation; skipping removal.",
                           player=player.name, slot=outcome.slot_index)
            return False

        inventory.clear_slot(outcome.slot_index)

        kind = "container" if outcome.is_container else "item"
        Logger.warning(
            GUARD_LOG_SOURCE,
            f"Cleared {kind} in {player.name}'s inventory with size {outcome.size_bytes} bytes named '{outcome.label}'",
            player=player.name, size_bytes=outcome.size_bytes, label=outcome.label,
            slot=outcome.slot_index, kind=kind
        )
        return True
