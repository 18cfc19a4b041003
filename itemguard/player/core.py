# itemguard/player/core.py
from typing import List, Optional, TYPE_CHECKING

from itemguard.config import DEFAULT_INVENTORY_MAX_SLOTS, DEFAULT_LOCALE
from itemguard.game_object import GameObject
from itemguard.items.inventory import Inventory

if TYPE_CHECKING:
    from itemguard.world.world import World

class Player(GameObject):
    """A connected player: identity, locale, live inventory and delivered messages."""

    def __init__(self, name: str, obj_id: Optional[str] = None, locale: str = DEFAULT_LOCALE,
                 inventory: Optional[Inventory] = None):
        super().__init__(obj_id=obj_id or f"player_{name.lower()}", name=name, description="A connected player.")
        self.locale = locale
        self.inventory = inventory if inventory is not None else Inventory(max_slots=DEFAULT_INVENTORY_MAX_SLOTS)
        self.messages: List[str] = []
        self.is_online = False
        self.world: Optional['World'] = None

    def send_message(self, message: str) -> None:
        self.messages.append(message)

    def __repr__(self) -> str:
        return f"<Player {self.name} id={self.obj_id!r}>"
