"""Shared pytest fixtures for model-describer tests."""

import io

import pytest
from rich.console import Console

from model_describer.config import Settings
from tests.fixtures.schema import StaticSchemaIntrospector


@pytest.fixture
def settings():
    """Settings pointing at the test models, independent of the environment."""
    return Settings(
        _env_file=None,
        default_namespace="tests.fixtures.models",
        database_default="sqlite",
        database_url=None,
        scalar_type_label="PHP type",
    )


@pytest.fixture
def console():
    """Wide Rich console writing into a buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def users_schema():
    """The users table: id, name, is_active."""
    return StaticSchemaIntrospector({
        "users": {
            "id": "integer",
            "name": "string",
            "is_active": "boolean",
        },
    })
