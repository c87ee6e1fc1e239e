"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from ..agents.ui_generator import ConfigGenerator
from ..services.prototypes import PrototypeService
from ..services.storage import InMemoryPrototypeStore, JsonFilePrototypeStore
from ..services.types import PrototypeStore
from .config import Settings


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        return self.settings

    @singleton
    @provider
    def provide_generator(self) -> ConfigGenerator:
        """Provide the config generator singleton."""
        return ConfigGenerator()

    @singleton
    @provider
    def provide_store(self) -> PrototypeStore:
        """Provide the configured prototype store."""
        if self.settings.storage_backend == "json":
            return JsonFilePrototypeStore(self.settings.storage_path)
        return InMemoryPrototypeStore()

    @singleton
    @provider
    def provide_prototype_service(
        self, store: PrototypeStore, generator: ConfigGenerator
    ) -> PrototypeService:
        """Provide prototype service with all dependencies."""
        return PrototypeService(store=store, generator=generator)


def create_container(settings: Settings) -> Injector:
    """Create configured injector."""
    return Injector([CoreModule(settings)])
