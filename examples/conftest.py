"""Shared pytest configuration for wren examples.

``example_app`` loads a fresh App from the ``app.py`` beside the test.
Each call re-executes app.py in its own module namespace, so in-memory
stores start empty for every test. ``browser`` and ``no_script_browser``
wrap that app in a headless session with and without the frame
behaviors.
"""

import importlib.util
from collections.abc import AsyncIterator
from pathlib import Path

import pytest

from wren import App
from wren.testing import Browser


@pytest.fixture
def example_app(request: pytest.FixtureRequest) -> App:
    """Load a fresh App from the sibling app.py next to the test file."""
    app_path = Path(request.path).parent / "app.py"
    spec = importlib.util.spec_from_file_location(f"example_{app_path.parent.name}", app_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.app


@pytest.fixture
async def browser(example_app: App) -> AsyncIterator[Browser]:
    async with Browser(example_app) as session:
        yield session


@pytest.fixture
async def no_script_browser(example_app: App) -> AsyncIterator[Browser]:
    async with Browser(example_app, scripts=False) as session:
        yield session
