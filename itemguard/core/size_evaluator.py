# itemguard/core/size_evaluator.py
"""
Measures the serialized footprint of an item.

The canonical form of an item is its type identifier, display name and attached
metadata, dumped as deterministic JSON (sorted keys, compact separators, raw
unicode). The size is the UTF-8 byte length of that text. Container contents
are not part of an item's own form; ContainerRecursionVisitor measures those.
"""
import json
from typing import Any, Dict, Optional

from itemguard.config import GUARD_LOG_SOURCE, GUARD_TEXT_ENCODING
from itemguard.items.item import Item
from itemguard.utils.logger import Logger


class SizeEvaluator:
    """Byte length of an item's canonical encoding. Encoding failures count as 0 bytes."""

    def __init__(self, encoding: str = GUARD_TEXT_ENCODING):
        self.encoding = encoding

    def canonical_form(self, item: Item) -> Dict[str, Any]:
        return {
            "item_type": item.item_type,
            "name": item.name,
            "properties": item.properties,
        }

    def encode(self, item: Item) -> str:
        """
        Deterministic text encoding of the item.

        Raises:
            TypeError, ValueError: If the metadata holds values JSON cannot represent
            (sets, arbitrary objects, circular references, NaN).
        """
        return json.dumps(self.canonical_form(item), sort_keys=True, separators=(",", ":"),
                          ensure_ascii=False, allow_nan=False)

    def measure(self, item: Optional[Item]) -> int:
        """
        Size in bytes of the item's canonical encoding.

        Returns 0 for a missing item and for an item whose metadata cannot be
        encoded (logged as a warning so operators can inspect it).
        """
        if item is None:
            return 0
        try:
            return len(self.encode(item).encode(self.encoding))
        except (TypeError, ValueError, RecursionError) as e:
            Logger.warning(GUARD_LOG_SOURCE, f"Could not encode metadata of {item!r}; counting it as 0 bytes: {e}",
                           item_type=getattr(item, "item_type", None))
            return 0
