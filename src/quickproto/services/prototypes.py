"""
Prototype Service
Create/read/update/delete prototypes and keep their UI configuration in sync
"""

from returns.result import Failure

from ..agents.models import AnswerSet, UIConfiguration
from ..agents.ui_generator import ConfigGenerator
from ..core.logging_config import get_logger
from ..core.validate import (
    ConfigurationError,
    CreatePrototypeRequest,
    UpdatePrototypeRequest,
    validate_config_document,
    validate_ui_config,
)
from .types import Prototype, PrototypeStore, utc_now

logger = get_logger(__name__)


class PrototypeNotFoundError(LookupError):
    """No prototype with the requested id."""

    def __init__(self, prototype_id: int) -> None:
        super().__init__(f"Prototype with id {prototype_id} not found")
        self.prototype_id = prototype_id


class PrototypeService:
    """
    Prototype CRUD.
    The UI configuration is always rebuilt from the full answer set,
    never patched.
    """

    def __init__(self, store: PrototypeStore, generator: ConfigGenerator) -> None:
        self.store = store
        self.generator = generator

    def _generate(self, answers: AnswerSet) -> UIConfiguration:
        config = self.generator.generate(answers)
        result = validate_ui_config(config)
        if isinstance(result, Failure):
            logger.error("generated_config_invalid", error=result.failure().message)
            raise ConfigurationError(result.failure().message)
        return config

    def create(self, request: CreatePrototypeRequest) -> Prototype:
        """Generate a configuration for the answers and store a new prototype."""
        answers = request.to_answers()
        config = self._generate(answers)
        now = utc_now()

        prototype = Prototype(
            id=self.store.next_id(),
            **answers.model_dump(),
            ui_config=config,
            created_at=now,
            updated_at=now,
        )
        self.store.insert(prototype)

        logger.info("prototype_created", prototype_id=prototype.id, components=len(config.components))
        return prototype

    def list_all(self) -> list[Prototype]:
        return self.store.list_all()

    def get(self, prototype_id: int) -> Prototype | None:
        return self.store.get(prototype_id)

    def update(self, prototype_id: int, request: UpdatePrototypeRequest) -> Prototype:
        """
        Apply a partial answer update.

        The configuration is regenerated from the merged answers when any
        answer is provided, and left untouched otherwise.

        Raises:
            PrototypeNotFoundError: If the prototype does not exist
        """
        current = self.store.get(prototype_id)
        if current is None:
            raise PrototypeNotFoundError(prototype_id)

        provided = request.provided_answers()
        changes: dict = {"updated_at": max(utc_now(), current.updated_at)}
        if provided:
            answers = current.answers.merge(provided)
            changes.update(answers.model_dump())
            changes["ui_config"] = self._generate(answers)

        updated = current.model_copy(update=changes)
        if self.store.replace(updated) is None:
            # Deleted between read and write
            raise PrototypeNotFoundError(prototype_id)

        logger.info(
            "prototype_updated",
            prototype_id=prototype_id,
            fields=sorted(provided),
            regenerated=bool(provided),
        )
        return updated

    def delete(self, prototype_id: int) -> bool:
        deleted = self.store.delete(prototype_id)
        logger.info("prototype_deleted", prototype_id=prototype_id, success=deleted)
        return deleted

    def preview(self, prototype_id: int) -> UIConfiguration:
        """
        Stored configuration of a prototype, re-validated for rendering.

        Raises:
            PrototypeNotFoundError: If the prototype does not exist
            ConfigurationError: If the stored configuration is malformed
        """
        try:
            prototype = self.store.get(prototype_id)
        except ConfigurationError as e:
            logger.error("stored_record_unreadable", prototype_id=prototype_id, error=str(e))
            raise ConfigurationError("Invalid UI configuration format") from e
        if prototype is None:
            raise PrototypeNotFoundError(prototype_id)

        result = validate_config_document(prototype.ui_config.to_document())
        if isinstance(result, Failure):
            logger.error("stored_config_invalid", prototype_id=prototype_id, error=result.failure().message)
            raise ConfigurationError("Invalid UI configuration format")
        return result.unwrap()
