"""
Pytest configuration and fixtures for dtogen tests.
"""

import json
from pathlib import Path
from typing import Any, Callable

import pytest


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[..., Path]:
    """Write a JSON document into the temporary directory and return its path."""

    def _write(document: Any, name: str = "input.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def connection_document() -> dict[str, Any]:
    return {
        "host": "db.internal",
        "port": 5432,
        "ssl": True,
        "credentials": {"user_name": "admin", "password": "secret"},
        "replicas": [
            {"host": "replica-1", "lag_ms": 12.5},
            {"host": "replica-2", "lag_ms": 3, "zone": "b"},
        ],
        "tags": ["primary", "eu"],
        "options": None,
    }
