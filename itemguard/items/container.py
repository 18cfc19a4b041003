# itemguard/items/container.py
from typing import Any, Dict, List, Optional
from itemguard.config import DEFAULT_CONTAINER_SLOTS
from itemguard.items.item import Item

class Container(Item):
     """A storage item that carries its own inventory of items (e.g. a shulker box)."""
     def __init__(self, item_type: str = "SHULKER_BOX", obj_id: Optional[str] = None,
                    name: Optional[str] = None, description: str = "",
                    capacity: int = DEFAULT_CONTAINER_SLOTS,
                    contents: Optional[List[Any]] = None,
                    **kwargs):

          # Containers never stack
          kwargs.pop('stackable', None)
          kwargs.pop('max_stack', None)

          super().__init__(item_type, obj_id, name, description, stackable=False, **kwargs)
          self.capacity = capacity

          # --- HYDRATE CONTENTS ---
          # Entries may be Item instances, None (empty slot), or dicts during load
          self.contents: Any = [None] * capacity
          if contents is not None:
               self.set_contents(contents)

     def set_contents(self, raw_contents: Any) -> None:
          if not isinstance(raw_contents, (list, tuple)):
               # Keep whatever the host handed us; the guard treats it as malformed
               self.contents = raw_contents
               return

          from itemguard.items.item_factory import ItemFactory

          hydrated: List[Optional[Item]] = []
          for entry in raw_contents:
               if entry is None or isinstance(entry, Item):
                    hydrated.append(entry)
               elif isinstance(entry, dict):
                    hydrated.append(ItemFactory.from_dict(entry))
               else:
                    hydrated.append(None)

          while len(hydrated) < self.capacity:
               hydrated.append(None)
          self.contents = hydrated

     def get_contents(self) -> Any:
          """Nested inventory of this container, one entry per slot (None = empty)."""
          return self.contents

     def add_item(self, item: Item) -> bool:
          if not isinstance(self.contents, list):
               return False
          for index, entry in enumerate(self.contents):
               if entry is None:
                    self.contents[index] = item
                    return True
          return False

     def get_items(self) -> List[Item]:
          if not isinstance(self.contents, list):
               return []
          return [entry for entry in self.contents if isinstance(entry, Item)]

     def to_dict(self) -> Dict[str, Any]:
          data = super().to_dict()
          data["capacity"] = self.capacity
          if isinstance(self.contents, list):
               data["contents"] = [entry.to_dict() if isinstance(entry, Item) else None
                                   for entry in self.contents]
          else:
               data["contents"] = None
          return data

     @classmethod
     def from_dict(cls, data: Dict[str, Any]) -> 'Container':
          container = cls(
               item_type=data.get("item_type", "SHULKER_BOX"),
               obj_id=data.get("obj_id") or data.get("id"),
               name=data.get("name"),
               description=data.get("description", ""),
               capacity=data.get("capacity", DEFAULT_CONTAINER_SLOTS),
          )
          container.properties = dict(data.get("properties", {}))
          if "contents" in data:
               container.set_contents(data["contents"])
          return container
