"""
Unit tests for HeuristicBackend.
"""

import pytest

from lumen_focus.backends.backend_exceptions import (
    BackendNotInitializedError,
    ModelLoadingError,
)
from lumen_focus.backends.heuristic_backend import (
    FALLBACK_MEMORY_ESTIMATE,
    HeuristicBackend,
)
from lumen_focus.config import ModelConfig


def _backend(path) -> HeuristicBackend:
    return HeuristicBackend(ModelConfig(model_path=str(path)))


class TestLoad:
    def test_load_existing_file(self, plain_model_file):
        backend = _backend(plain_model_file)
        backend.load()

        assert backend.is_initialized

    def test_load_is_idempotent(self, plain_model_file):
        backend = _backend(plain_model_file)
        backend.load()
        backend.load()

        assert backend.is_initialized

    def test_missing_file(self, tmp_path):
        with pytest.raises(ModelLoadingError, match="not found"):
            _backend(tmp_path / "absent.gguf").load()

    def test_directory_is_rejected(self, tmp_path):
        with pytest.raises(ModelLoadingError):
            _backend(tmp_path).load()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.gguf"
        path.touch()

        with pytest.raises(ModelLoadingError, match="empty"):
            _backend(path).load()


class TestClassify:
    def test_classify_before_load(self, plain_model_file):
        with pytest.raises(BackendNotInitializedError):
            _backend(plain_model_file).classify("tutorial")

    def test_classify_uses_keyword_engine(self, plain_model_file):
        backend = _backend(plain_model_file)
        backend.load()

        result = backend.classify("A guide to sourdough")

        assert result.is_productive
        assert result.reason == "educational_keywords"


class TestMetadata:
    def test_memory_usage(self, plain_model_file):
        backend = _backend(plain_model_file)
        assert backend.memory_usage() == 0

        backend.load()
        assert backend.memory_usage() == FALLBACK_MEMORY_ESTIMATE == 200 * 1024 * 1024

        backend.unload()
        assert backend.memory_usage() == 0

    def test_describe(self, plain_model_file):
        assert _backend(plain_model_file).describe() == f"Fallback mode: {plain_model_file}"

    def test_get_info(self, plain_model_file):
        info = _backend(plain_model_file).get_info()

        assert info.runtime == "heuristic"
        assert info.as_dict()["extra"] == {"mode": "fallback"}
