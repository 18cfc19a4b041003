# itemguard/utils/utils.py
from typing import Optional

from itemguard.config import FORMAT_CODES
from itemguard.items.item import Item

def get_item_label(item: Optional[Item]) -> str:
    """Custom display name if the item has a non-blank one, else its readable type identifier."""
    if item is None:
        return ""
    if item.has_display_name():
        return str(item.name)
    return str(item.item_type).lower().replace("_", " ")

def strip_format_codes(text: str) -> str:
    for code in FORMAT_CODES:
        text = text.replace(code, "")
    return text
