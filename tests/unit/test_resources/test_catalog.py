"""
Unit tests for the model catalog and sizing helpers.
"""

import pytest
from pydantic import ValidationError

from lumen_focus.resources.catalog import (
    GIB,
    MIB,
    MODEL_CATALOG,
    ModelInfo,
    check_available_memory,
    format_file_size,
    get_available_model_names,
    get_available_models,
    get_default_model,
    get_model,
    get_model_download_info,
    get_model_memory_requirement,
    get_recommended_model_path,
)
from lumen_focus.resources.exceptions import ModelNotFoundError


class TestCatalog:
    def test_catalog_ids(self):
        assert get_available_model_names() == [
            "gemma-270m-q4",
            "qwen2-0.5b-q4",
            "gemma-2b-q4",
        ]

    def test_ids_are_unique(self):
        ids = [m.id for m in MODEL_CATALOG]
        assert len(ids) == len(set(ids))

    def test_available_models_is_a_copy(self):
        models = get_available_models()
        models.clear()

        assert len(get_available_models()) == 3

    def test_default_model_is_first(self):
        default = get_default_model()

        assert default.id == "gemma-270m-q4"
        assert default.size_bytes == 150 * MIB

    def test_get_model(self):
        assert get_model("qwen2-0.5b-q4").filename == "qwen2-0_5b-instruct-q4_k_m.gguf"

    def test_unknown_model_raises(self):
        with pytest.raises(ModelNotFoundError, match="Model not found: nope"):
            get_model("nope")

    def test_recommended_path(self, tmp_path):
        path = get_recommended_model_path(tmp_path)

        assert path == tmp_path / "gemma-3-270m-it-Q4_K_M.gguf"


class TestModelInfo:
    def test_entries_are_immutable(self):
        with pytest.raises(ValidationError):
            get_default_model().size_bytes = 1

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError):
            ModelInfo(id="x", url="u", filename="f", size_bytes=-1)

    def test_hugging_face_locator(self):
        model = get_model("qwen2-0.5b-q4")

        assert model.repo_id == "Qwen/Qwen2-0.5B-Instruct-GGUF"
        assert model.repo_filename == "qwen2-0_5b-instruct-q4_k_m.gguf"

    def test_non_hub_locator(self):
        model = ModelInfo(
            id="local", url="https://example.com/m.gguf", filename="m.gguf", size_bytes=1
        )

        assert model.repo_id is None
        assert model.repo_filename == "m.gguf"

    def test_as_dict(self):
        data = get_default_model().as_dict()

        assert set(data) == {
            "id",
            "url",
            "filename",
            "size_bytes",
            "checksum",
            "description",
        }


class TestSizing:
    def test_memory_requirement_adds_overhead(self):
        model = get_default_model()

        assert get_model_memory_requirement(model) == int(150 * MIB * 1.3)

    def test_check_available_memory_default_budget(self):
        assert check_available_memory(GIB)
        assert not check_available_memory(2 * GIB)

    def test_check_available_memory_explicit_budget(self):
        assert check_available_memory(100, available_bytes=101)
        assert not check_available_memory(100, available_bytes=100)

    @pytest.mark.parametrize(
        "size,expected",
        [
            (512, "512 B"),
            (2048, "2 KB"),
            (150 * MIB, "150 MB"),
            (1536 * MIB, "1 GB"),
            (3 * GIB, "3 GB"),
        ],
    )
    def test_format_file_size(self, size, expected):
        assert format_file_size(size) == expected

    def test_download_info(self):
        assert (
            get_model_download_info("gemma-2b-q4")
            == "Gemma 3 2B - Higher quality but larger model (Size: 1 GB)"
        )

    def test_download_info_unknown(self):
        assert get_model_download_info("nope") == "Model not found: nope"
