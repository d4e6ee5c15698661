"""Shared fixtures for restnames tests.

The sample description mixes Swagger 2 path shapes: a version prefix, a
path item ``parameters`` key, verb collisions and a malformed path.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import yaml


@pytest.fixture
def sample_spec() -> dict[str, Any]:
    """Small API description covering the naming rules."""
    return {
        "swagger": "2.0",
        "info": {"title": "Dashboard", "version": "1.0"},
        "basePath": "/api",
        "paths": {
            "app": {
                "get": {"summary": "List apps."},
                "post": {"description": "Creates an app. Requires admin."},
                "patch": {},
            },
            "app/{id}": {
                "parameters": [{"name": "id", "in": "path"}],
                "get": {"summary": "Get an app"},
                "put": {},
                "delete": {},
            },
            "app/saveFromTiApp": {
                "post": {},
            },
            "app/{app_guid}/module/{module_guid}/verification": {
                "get": {},
            },
            "acs/{app_guid}/push_devices/{app_env}/unsubscribe": {
                "delete": {},
            },
            "/v1/widgets/{widget_id}": {
                "get": {},
            },
            "/v1": {
                "get": {},
            },
        },
    }


@pytest.fixture
def spec_file(tmp_path: Path, sample_spec: dict[str, Any]) -> Path:
    """The sample description written to a JSON file."""
    path = tmp_path / "swagger.json"
    path.write_text(json.dumps(sample_spec))
    return path


@pytest.fixture
def yaml_spec_file(tmp_path: Path, sample_spec: dict[str, Any]) -> Path:
    """The sample description written to a YAML file."""
    path = tmp_path / "swagger.yaml"
    path.write_text(yaml.safe_dump(sample_spec))
    return path
