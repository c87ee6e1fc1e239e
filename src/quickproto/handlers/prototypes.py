"""Prototype Handler."""

import time
from collections.abc import Callable
from typing import Any, TypeVar

from fastapi import APIRouter, HTTPException, Request, status

from ..core import get_logger, ConfigurationError, CreatePrototypeRequest, UpdatePrototypeRequest
from ..monitoring import metrics_collector
from ..services import PrototypeService, PrototypeNotFoundError


logger = get_logger(__name__)

T = TypeVar("T")


class PrototypeHandler:
    """Handles prototype requests."""

    def __init__(self, service: PrototypeService) -> None:
        self.service = service

    def _run(self, operation: str, func: Callable[[], T]) -> T:
        """Run a service call with timing, metrics and HTTP error mapping."""
        start_time = time.time()
        try:
            result = func()
        except PrototypeNotFoundError as e:
            metrics_collector.record_operation(operation, "not_found", time.time() - start_time)
            logger.info("not_found", operation=operation, prototype_id=e.prototype_id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
        except ConfigurationError as e:
            metrics_collector.record_operation(operation, "error", time.time() - start_time)
            metrics_collector.record_error("configuration_error", "prototype_handler")
            logger.error("configuration", operation=operation, error=str(e))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Invalid UI configuration",
            ) from e
        except Exception as e:
            metrics_collector.record_operation(operation, "error", time.time() - start_time)
            metrics_collector.record_error(type(e).__name__, "prototype_handler")
            logger.error("operation_failed", operation=operation, error=str(e))
            raise

        metrics_collector.record_operation(operation, "success", time.time() - start_time)
        return result

    def create(self, payload: CreatePrototypeRequest) -> dict[str, Any]:
        prototype = self._run("create", lambda: self.service.create(payload))
        metrics_collector.record_components(c.type.value for c in prototype.ui_config.components)
        return prototype.to_document()

    def list_all(self) -> list[dict[str, Any]]:
        prototypes = self._run("list", self.service.list_all)
        return [p.to_document() for p in prototypes]

    def get(self, prototype_id: int) -> dict[str, Any]:
        def fetch():
            prototype = self.service.get(prototype_id)
            if prototype is None:
                raise PrototypeNotFoundError(prototype_id)
            return prototype

        return self._run("get", fetch).to_document()

    def update(self, prototype_id: int, payload: UpdatePrototypeRequest) -> dict[str, Any]:
        prototype = self._run("update", lambda: self.service.update(prototype_id, payload))
        if payload.provided_answers():
            metrics_collector.record_components(c.type.value for c in prototype.ui_config.components)
        return prototype.to_document()

    def delete(self, prototype_id: int) -> dict[str, bool]:
        return {"success": self._run("delete", lambda: self.service.delete(prototype_id))}

    def preview(self, prototype_id: int) -> dict[str, Any]:
        config = self._run("preview", lambda: self.service.preview(prototype_id))
        return config.to_document()


def _handler(request: Request) -> PrototypeHandler:
    return request.app.state.prototype_handler


router = APIRouter(prefix="/prototypes", tags=["prototypes"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_prototype(payload: CreatePrototypeRequest, request: Request) -> dict[str, Any]:
    """Create a prototype from the five answers."""
    return _handler(request).create(payload)


@router.get("")
def list_prototypes(request: Request) -> list[dict[str, Any]]:
    """All prototypes."""
    return _handler(request).list_all()


@router.get("/{prototype_id}")
def get_prototype(prototype_id: int, request: Request) -> dict[str, Any]:
    return _handler(request).get(prototype_id)


@router.patch("/{prototype_id}")
def update_prototype(
    prototype_id: int, payload: UpdatePrototypeRequest, request: Request
) -> dict[str, Any]:
    """Partially update answers; the UI is regenerated when any answer changes."""
    return _handler(request).update(prototype_id, payload)


@router.delete("/{prototype_id}")
def delete_prototype(prototype_id: int, request: Request) -> dict[str, bool]:
    return _handler(request).delete(prototype_id)


@router.get("/{prototype_id}/preview")
def preview_prototype(prototype_id: int, request: Request) -> dict[str, Any]:
    """Stored UI configuration for the preview renderer."""
    return _handler(request).preview(prototype_id)
