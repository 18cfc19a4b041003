# itemguard/game_object.py
import uuid
from typing import Any, Dict, Optional

class GameObject:
    def __init__(self, obj_id: Optional[str] = None, name: Optional[str] = None,
                 description: str = ""):
        self.obj_id = obj_id if obj_id else f"{self.__class__.__name__.lower()}_{uuid.uuid4().hex[:8]}"
        self.name = name
        self.description = description
        self.properties: Dict[str, Any] = {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.__class__.__name__,
            "id": self.obj_id,
            "name": self.name,
            "description": self.description,
            "properties": self.properties
        }

    def update_property(self, key: str, value: Any) -> None:
        self.properties[key] = value

