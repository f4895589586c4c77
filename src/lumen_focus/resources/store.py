"""
On-disk model store: where catalog artifacts live once acquired.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .catalog import MODEL_CATALOG, ModelInfo
from .validator import ModelFileValidator

logger = logging.getLogger(__name__)

PARTIAL_DOWNLOAD_SUFFIX = ".tmp"


class ModelStore:
    """Directory of downloaded model artifacts."""

    def __init__(
        self, models_dir: str | Path, validator: ModelFileValidator | None = None
    ) -> None:
        self.models_dir = Path(models_dir).expanduser()
        self.validator = validator or ModelFileValidator()

    def ensure_dir(self) -> Path:
        self.models_dir.mkdir(parents=True, exist_ok=True)
        return self.models_dir

    def model_path(self, model: ModelInfo) -> Path:
        return self.models_dir / model.filename

    def is_downloaded(self, model: ModelInfo) -> bool:
        return self.validator.validate(self.model_path(model))

    def downloaded_models(self) -> list[ModelInfo]:
        return [m for m in MODEL_CATALOG if self.model_path(m).is_file()]

    def delete(self, model: ModelInfo) -> bool:
        path = self.model_path(model)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Error deleting model {model.id}: {e}")
            return False
        return True

    def total_size(self) -> int:
        if not self.models_dir.is_dir():
            return 0
        return sum(p.stat().st_size for p in self.models_dir.iterdir() if p.is_file())

    def clear_partial_downloads(self) -> int:
        """Remove leftover partial downloads; returns how many were removed."""
        if not self.models_dir.is_dir():
            return 0
        removed = 0
        for path in self.models_dir.glob(f"*{PARTIAL_DOWNLOAD_SUFFIX}"):
            path.unlink(missing_ok=True)
            removed += 1
        return removed
