"""Shared fixtures for the example apps.

Each example directory has an ``app.py`` exposing ``app``; the
``example_app`` fixture loads the one next to the requesting test.
"""

import importlib.util
from pathlib import Path

import pytest

from wren import App


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def example_app(request: pytest.FixtureRequest) -> App:
    app_path = Path(request.path).parent / "app.py"
    module_name = f"_example_{app_path.parent.name}"
    spec = importlib.util.spec_from_file_location(module_name, app_path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.app
