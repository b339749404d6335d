from dataclasses import dataclass, field
from typing import Optional, Dict, Any

@dataclass
class Coordinate:
    latitude: Optional[str] = None   # decimal degrees, e.g. "30.0444"
    longitude: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.latitude and self.longitude)

@dataclass
class Entity:
    entity: str
    value: str
    location: Optional[list] = None
    confidence: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entity":
        return cls(
            entity=str(data.get("entity") or ""),
            value=str(data.get("value") or ""),
            location=data.get("location"),
            confidence=data.get("confidence"),
        )

@dataclass
class ConversationPayload:
    workspace_id: str
    context: Dict[str, Any] = field(default_factory=dict)
    input: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"workspace_id": self.workspace_id, "context": self.context, "input": self.input}
