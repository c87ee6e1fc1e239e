"""
Prototype Record Types
Persisted prototype entity and the storage protocol
"""

from datetime import datetime, timezone
from typing import Any, Protocol

from pydantic import BaseModel, Field

from ..agents.models import ANSWER_FIELDS, AnswerSet, UIConfiguration


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Prototype(BaseModel):
    """A stored answer set together with its generated UI configuration"""
    id: int = Field(..., ge=1)
    problem_or_goal: str
    content_elements: str
    call_to_action: str
    visual_elements: str
    atmosphere: str
    ui_config: UIConfiguration
    created_at: datetime
    updated_at: datetime

    @property
    def answers(self) -> AnswerSet:
        return AnswerSet(**{name: getattr(self, name) for name in ANSWER_FIELDS})

    def to_document(self) -> dict[str, Any]:
        """JSON-ready representation used by stores and HTTP responses"""
        document = self.model_dump(mode="json", exclude={"ui_config"})
        document["ui_config"] = self.ui_config.to_document()
        return document


class PrototypeStore(Protocol):
    """Protocol for prototype storage backends"""

    def next_id(self) -> int:
        """Reserve the next record id"""
        ...

    def insert(self, prototype: Prototype) -> Prototype:
        """Store a new record"""
        ...

    def get(self, prototype_id: int) -> Prototype | None:
        """Fetch a record by id"""
        ...

    def list_all(self) -> list[Prototype]:
        """All records ordered by id"""
        ...

    def replace(self, prototype: Prototype) -> Prototype | None:
        """Overwrite an existing record; None if it does not exist"""
        ...

    def delete(self, prototype_id: int) -> bool:
        """Remove a record; False if it does not exist"""
        ...
