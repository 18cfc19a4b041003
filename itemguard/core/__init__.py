# itemguard/core/__init__.py
"""
Core Package.
Size evaluation, container aggregation, threshold decisions and enforcement.
"""
from .size_evaluator import SizeEvaluator
from .container_visitor import ContainerRecursionVisitor
from .threshold_enforcer import EnforcementOutcome, ThresholdEnforcer
from .enforcement_executor import EnforcementExecutor
from .inventory_guard import InventoryGuard, read_guard_settings
