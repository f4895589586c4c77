"""
Pytest configuration and shared fixtures for Lumen-Focus tests.

This file provides common fixtures and configuration for all test modules.
"""

from pathlib import Path

import pytest

from lumen_focus.backends.factory import reload_backends
from lumen_focus.config import ModelConfig
from lumen_focus.manager import ModelLifecycleManager
from lumen_focus.resources.validator import GGUF_MAGIC


@pytest.fixture(autouse=True)
def fresh_backend_registry():
    """Re-scan runtimes after each test so find_spec mocks never leak."""
    yield
    reload_backends()


@pytest.fixture
def gguf_model_file(tmp_path) -> Path:
    """A file that passes GGUF validation (magic + 2 KiB payload)."""
    model_path = tmp_path / "mock_model.gguf"
    model_path.write_bytes(GGUF_MAGIC + bytes(2048))
    return model_path


@pytest.fixture
def plain_model_file(tmp_path) -> Path:
    """A readable, non-empty file that is not a GGUF artifact."""
    model_path = tmp_path / "mock_model.bin"
    model_path.write_bytes(b"mock_model_content")
    return model_path


@pytest.fixture
def model_config(gguf_model_file) -> ModelConfig:
    return ModelConfig(model_path=str(gguf_model_file))


@pytest.fixture
def loaded_manager(model_config):
    """A heuristic-mode manager with a model loaded."""
    manager = ModelLifecycleManager(runtime="heuristic")
    assert manager.load(model_config)
    yield manager
    manager.unload()


@pytest.fixture
def sample_texts():
    """Representative inputs with their expected heuristic verdicts."""
    return {
        "tutorial": ("Python tutorial for beginners", True),
        "clickbait": ("You won't believe what happened next", False),
        "neutral": ("The weather today is mild", True),
        "shouting": ("THIS IS ABSOLUTELY AMAZING STUFF", False),
    }


# Custom pytest markers for categorizing tests
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "slow: marks tests as slow running")
    config.addinivalue_line(
        "markers", "model_loading: marks tests for model loading"
    )


def pytest_collection_modifyitems(config, items):
    """Add markers to tests based on their location."""
    for item in items:
        if "unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
