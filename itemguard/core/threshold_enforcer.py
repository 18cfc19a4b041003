# itemguard/core/threshold_enforcer.py
"""
Keep/remove decisions for every slot of an inventory snapshot.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from itemguard.config import DECISION_KEPT, DECISION_REMOVED, GUARD_LOG_SOURCE
from itemguard.core.container_visitor import ContainerRecursionVisitor
from itemguard.core.size_evaluator import SizeEvaluator
from itemguard.items.container import Container
from itemguard.items.item import Item
from itemguard.utils.logger import Logger
from itemguard.utils.utils import get_item_label


@dataclass(frozen=True)
class EnforcementOutcome:
    slot_index: int
    item: Item
    decision: str = DECISION_KEPT
    size_bytes: int = 0
    label: str = ""
    is_container: bool = False

    @property
    def removed(self) -> bool:
        return self.decision == DECISION_REMOVED


class ThresholdEnforcer:
    """
    Compares each slot against the byte cap.

    A simple item is removed when its own size is strictly greater than the cap.
    A container is judged on the summed size of its contents and is removed or
    kept as a whole. Slots are independent of each other, so the order of the
    snapshot never changes the result.
    """

    def __init__(self, threshold: int, evaluator: Optional[SizeEvaluator] = None,
                 visitor: Optional[ContainerRecursionVisitor] = None):
        if threshold < 0:
            raise ValueError(f"Size threshold must be non-negative, got {threshold}")
        self.threshold = threshold
        self.evaluator = evaluator or SizeEvaluator()
        self.visitor = visitor or ContainerRecursionVisitor(self.evaluator)

    def evaluate_item(self, slot_index: int, item: Item) -> EnforcementOutcome:
        if isinstance(item, Container):
            aggregate = self.visitor.aggregate_size(item)
            if aggregate is None:
                Logger.warning(GUARD_LOG_SOURCE, f"Container in slot {slot_index} has no usable contents; keeping it.",
                               slot=slot_index, item_type=item.item_type)
                return EnforcementOutcome(slot_index, item, DECISION_KEPT, 0, get_item_label(item), True)
            size = aggregate
            is_container = True
        else:
            size = self.evaluator.measure(item)
            is_container = False

        decision = DECISION_REMOVED if size > self.threshold else DECISION_KEPT
        return EnforcementOutcome(slot_index, item, decision, size, get_item_label(item), is_container)

    def evaluate(self, snapshot: Sequence[Optional[Item]], player_name: str = "") -> List[EnforcementOutcome]:
        """
        One outcome per occupied slot, in snapshot order. Empty slots produce nothing.
        A slot whose evaluation fails unexpectedly is logged and kept.
        """
        outcomes: List[EnforcementOutcome] = []
        for slot_index, item in enumerate(snapshot):
            if item is None:
                continue
            try:
                outcomes.append(self.evaluate_item(slot_index, item))
            except Exception as e:
                Logger.error(GUARD_LOG_SOURCE, f"Error evaluating slot {slot_index}; keeping it: {e}",
                             player=player_name, slot=slot_index)
                outcomes.append(EnforcementOutcome(slot_index, item, DECISION_KEPT, 0,
                                                   str(getattr(item, "item_type", "")), isinstance(item, Container)))
        return outcomes
