"""
Unit tests for the lumen-focus command line interface.
"""

import json
from unittest.mock import patch

import pytest
import yaml

from lumen_focus import cli
from lumen_focus.resources.catalog import get_model
from lumen_focus.resources.platform import create_placeholder_model


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch.object(cli, "setup_logging") as mock_setup:
        yield mock_setup


def _run(argv):
    try:
        cli.main(argv)
    except SystemExit as e:
        return e.code
    return 0


class TestClassify:
    def test_json_output(self, gguf_model_file, capsys):
        code = _run(
            [
                "classify",
                "A complete tutorial",
                "--model",
                str(gguf_model_file),
                "--runtime",
                "heuristic",
                "--raw",
                "--json",
            ]
        )

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["success"] is True
        assert data["is_productive"] is True
        assert data["reason"] == "educational_keywords"
        assert "error" not in data

    def test_context_is_applied(self, gguf_model_file, capsys):
        code = _run(
            [
                "classify",
                "tutorial",
                "--model",
                str(gguf_model_file),
                "--runtime",
                "heuristic",
                "--app",
                "com.linkedin.android",
            ]
        )

        assert code == 0
        out = capsys.readouterr().out
        assert "PRODUCTIVE" in out
        assert "educational_keywords_linkedin_boost_educational_boost_short_content" in out

    def test_missing_model_fails(self, tmp_path, capsys):
        code = _run(
            [
                "classify",
                "tutorial",
                "--model",
                str(tmp_path / "absent.gguf"),
                "--runtime",
                "heuristic",
            ]
        )

        assert code == 1
        assert "❌ Error" in capsys.readouterr().out

    def test_default_model_from_config(self, tmp_path, capsys):
        model = get_model("gemma-270m-q4")
        create_placeholder_model(tmp_path / model.filename)
        config = tmp_path / "focus.yaml"
        config.write_text(
            yaml.safe_dump({"runtime": "heuristic", "models_dir": str(tmp_path)}),
            encoding="utf-8",
        )

        code = _run(["--config", str(config), "classify", "tutorial", "--json"])

        assert code == 0
        assert json.loads(capsys.readouterr().out)["success"] is True

    def test_invalid_config(self, tmp_path, capsys):
        config = tmp_path / "focus.yaml"
        config.write_text("runtime: tensorrt\n", encoding="utf-8")

        code = _run(["--config", str(config), "classify", "tutorial"])

        assert code == 1
        assert "Configuration validation failed" in capsys.readouterr().out


class TestValidate:
    def test_valid_file(self, gguf_model_file, capsys):
        assert _run(["validate", str(gguf_model_file)]) == 0

        out = capsys.readouterr().out
        assert f"GGUF Model: {gguf_model_file}" in out
        assert "✅" in out

    def test_invalid_file(self, plain_model_file, capsys):
        assert _run(["validate", str(plain_model_file)]) == 1
        assert "Invalid model file" in capsys.readouterr().out

    def test_checksum_mismatch(self, gguf_model_file, capsys):
        assert _run(["validate", str(gguf_model_file), "--checksum", "0" * 64]) == 1
        assert "Checksum mismatch" in capsys.readouterr().out


class TestModels:
    def test_lists_catalog(self, tmp_path, capsys):
        create_placeholder_model(tmp_path / get_model("qwen2-0.5b-q4").filename)

        assert _run(["models", "--dir", str(tmp_path)]) == 0

        out = capsys.readouterr().out
        for model_id in ("gemma-270m-q4", "qwen2-0.5b-q4", "gemma-2b-q4"):
            assert model_id in out
        assert "✅ qwen2-0.5b-q4" in out
        assert "⬜ gemma-270m-q4" in out


class TestDownload:
    def test_placeholder_download(self, tmp_path, capsys):
        code = _run(["download", "gemma-270m-q4", "--dir", str(tmp_path), "--placeholder"])

        assert code == 0
        assert (tmp_path / get_model("gemma-270m-q4").filename).is_file()
        out = capsys.readouterr().out
        assert "downloading" in out
        assert "🎉 Model ready" in out

    def test_unknown_model(self, tmp_path, capsys):
        code = _run(["download", "nope", "--dir", str(tmp_path)])

        assert code == 1
        assert "Model not found: nope" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert _run([]) == 1
    assert "usage" in capsys.readouterr().out
