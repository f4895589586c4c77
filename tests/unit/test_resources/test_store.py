"""
Unit tests for the on-disk model store.
"""

from lumen_focus.resources.catalog import get_default_model, get_model
from lumen_focus.resources.platform import create_placeholder_model
from lumen_focus.resources.store import ModelStore


def test_model_path(tmp_path):
    store = ModelStore(tmp_path)
    model = get_default_model()

    assert store.model_path(model) == tmp_path / model.filename


def test_ensure_dir_creates_directory(tmp_path):
    store = ModelStore(tmp_path / "a" / "b")

    assert store.ensure_dir().is_dir()


def test_is_downloaded_requires_valid_artifact(tmp_path):
    store = ModelStore(tmp_path)
    model = get_default_model()

    assert not store.is_downloaded(model)

    store.model_path(model).write_bytes(b"garbage")
    assert not store.is_downloaded(model)

    create_placeholder_model(store.model_path(model))
    assert store.is_downloaded(model)


def test_downloaded_models_and_delete(tmp_path):
    store = ModelStore(tmp_path)
    model = get_model("qwen2-0.5b-q4")
    create_placeholder_model(store.model_path(model))

    assert [m.id for m in store.downloaded_models()] == ["qwen2-0.5b-q4"]
    assert store.delete(model)
    assert store.downloaded_models() == []
    # deleting again is harmless
    assert store.delete(model)


def test_total_size(tmp_path):
    store = ModelStore(tmp_path)
    (tmp_path / "a.gguf").write_bytes(bytes(100))
    (tmp_path / "b.gguf").write_bytes(bytes(50))

    assert store.total_size() == 150
    assert ModelStore(tmp_path / "missing").total_size() == 0


def test_clear_partial_downloads(tmp_path):
    store = ModelStore(tmp_path)
    (tmp_path / "one.gguf.tmp").write_bytes(b"x")
    (tmp_path / "two.tmp").write_bytes(b"x")
    (tmp_path / "keep.gguf").write_bytes(b"x")

    assert store.clear_partial_downloads() == 2
    assert [p.name for p in tmp_path.iterdir()] == ["keep.gguf"]
