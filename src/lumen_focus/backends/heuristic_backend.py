"""
HeuristicBackend: fallback backend used when no inference runtime is available.

Loading only confirms that the configured artifact is a readable, non-empty
file; classification is the deterministic keyword/surface-statistics engine.
"""

from __future__ import annotations

import logging

from typing_extensions import override

from ..classifier.heuristics import classify_with_heuristics
from ..models import ClassificationResult
from .backend_exceptions import BackendNotInitializedError, ModelLoadingError
from .base import BackendInfo, BaseClassifierBackend, RuntimeKind

logger = logging.getLogger(__name__)

# Expected resident footprint of a small quantized model in fallback mode
FALLBACK_MEMORY_ESTIMATE = 200 * 1024 * 1024


class HeuristicBackend(BaseClassifierBackend):
    """Keyword-based classifier standing in for a real model."""

    runtime = RuntimeKind.HEURISTIC

    @override
    def load(self) -> None:
        if self._initialized:
            return

        path = self.config.path
        logger.info(f"Loading model from: {path} (fallback mode)")

        if not path.is_file():
            raise ModelLoadingError(f"Model file not found: {path}")

        try:
            with open(path, "rb") as f:
                first = f.read(1)
        except OSError as e:
            raise ModelLoadingError(f"Model file not readable: {path}: {e}") from e

        if not first:
            raise ModelLoadingError(f"Model file is empty: {path}")

        self._initialized = True
        logger.info("Model loaded successfully (fallback mode)")

    @override
    def classify(self, text: str) -> ClassificationResult:
        if not self._initialized:
            raise BackendNotInitializedError("HeuristicBackend used before load()")
        return classify_with_heuristics(text)

    @override
    def memory_usage(self) -> int:
        return FALLBACK_MEMORY_ESTIMATE if self._initialized else 0

    @override
    def get_info(self) -> BackendInfo:
        return BackendInfo(
            runtime=self.runtime.value,
            model_path=str(self.config.path),
            extra={"mode": "fallback"},
        )

    @override
    def describe(self) -> str:
        return f"Fallback mode: {self.config.model_path}"
