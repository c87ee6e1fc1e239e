"""Pytest configuration and fixtures."""

import os
import pytest

from fastapi.testclient import TestClient

from quickproto.agents.models import AnswerSet
from quickproto.agents.ui_generator import ConfigGenerator
from quickproto.core.config import Settings
from quickproto.core.logging_config import configure_logging
from quickproto.core.validate import CreatePrototypeRequest
from quickproto.main import create_app
from quickproto.services.prototypes import PrototypeService
from quickproto.services.storage import InMemoryPrototypeStore


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['PROTO_LOG_LEVEL'] = 'WARNING'
    os.environ['PROTO_STORAGE_BACKEND'] = 'memory'
    configure_logging(os.environ['PROTO_LOG_LEVEL'])


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def sample_answers_data():
    """The task-manager answers used across the suite."""
    return {
        "problem_or_goal": "Necesitamos una aplicación simple para gestionar tareas diarias.",
        "content_elements": "Lista de tareas y formulario para agregar nuevas tareas.",
        "call_to_action": "Comenzar ahora",
        "visual_elements": "Imagen del dashboard principal.",
        "atmosphere": "Ambiente profesional con colores azules.",
    }


@pytest.fixture
def sample_answers(sample_answers_data):
    return AnswerSet(**sample_answers_data)


@pytest.fixture
def plain_answers():
    """Answers that trigger no conditional component and no color keyword."""
    return AnswerSet(
        problem_or_goal="Build an efficient management tool.",
        content_elements="Un resumen corto.",
        call_to_action="Sign up now",
        visual_elements="Nada especial.",
        atmosphere="Tranquilo.",
    )


@pytest.fixture
def create_request(sample_answers_data):
    return CreatePrototypeRequest(**sample_answers_data)


# ============================================================================
# Component Fixtures
# ============================================================================

@pytest.fixture
def generator():
    """Config generator with the default rule tables."""
    return ConfigGenerator()


@pytest.fixture
def store():
    return InMemoryPrototypeStore()


@pytest.fixture
def prototype_service(store, generator):
    return PrototypeService(store=store, generator=generator)


# ============================================================================
# HTTP Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """In-memory settings, independent of the environment."""
    return Settings(storage_backend="memory")


@pytest.fixture
def client(settings):
    """Test client over a fresh application."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client
