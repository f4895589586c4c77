"""
Base backend interface for content classifiers.

This module defines the runtime-agnostic capability interface that every
classification backend (llama.cpp, heuristic fallback) implements, so the
lifecycle manager can switch between them without changing what callers see.
A backend is responsible for:

- Model lifecycle: load() / unload()
- Classifying raw text into a ClassificationResult
- Reporting its memory footprint and runtime metadata

Notes:
- A backend instance configures exactly one artifact (its ModelConfig).
- classify() on a backend that is not loaded raises BackendNotInitializedError;
  the manager converts every backend error into a failed result.
"""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field

from ..config import ModelConfig
from ..models import ClassificationResult

__all__ = [
    "RuntimeKind",
    "BackendInfo",
    "BaseClassifierBackend",
]


class RuntimeKind(str, enum.Enum):
    """Enumerates the runtime families for backends."""

    LLAMA_CPP = "llama_cpp"
    HEURISTIC = "heuristic"


@dataclass
class BackendInfo:
    """Describes the active backend configuration."""

    runtime: str
    model_path: str
    n_ctx: int | None = None
    n_threads: int | None = None
    n_gpu_layers: int | None = None
    version: str | None = None
    extra: dict[str, str | None] = field(default_factory=dict)

    def as_dict(self) -> dict[str, object]:
        """Convert to a plain dict (safe for JSON serialization)."""
        return {
            "runtime": self.runtime,
            "model_path": self.model_path,
            "n_ctx": self.n_ctx,
            "n_threads": self.n_threads,
            "n_gpu_layers": self.n_gpu_layers,
            "version": self.version,
            "extra": dict(self.extra),
        }


class BaseClassifierBackend(abc.ABC):
    """
    Abstract base for classification backends.

    Implementations MUST:
    - Acquire runtime resources in load() and raise ModelLoadingError on failure
    - Release everything in unload(), leaving the handle cleared even if the
      runtime reports an error
    - Provide accurate BackendInfo via get_info()
    """

    runtime: RuntimeKind

    def __init__(self, config: ModelConfig) -> None:
        self.config: ModelConfig = config
        self._initialized: bool = False

    # ---------- Lifecycle ----------

    @abc.abstractmethod
    def load(self) -> None:
        """Load the artifact and prepare the runtime. Must be idempotent."""
        raise NotImplementedError

    def unload(self) -> None:
        """Release runtime resources. Safe to call repeatedly."""
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        """Whether load() has successfully completed."""
        return self._initialized

    # ---------- Classification ----------

    @abc.abstractmethod
    def classify(self, text: str) -> ClassificationResult:
        raise NotImplementedError

    def clear_cache(self) -> None:
        """Drop any runtime-side cache. Optional override."""
        return

    # ---------- Metadata ----------

    @abc.abstractmethod
    def memory_usage(self) -> int:
        """Bytes attributed to the loaded model; 0 when not loaded."""
        raise NotImplementedError

    @abc.abstractmethod
    def get_info(self) -> BackendInfo:
        raise NotImplementedError

    @abc.abstractmethod
    def describe(self) -> str:
        """Human-readable status line for the loaded model."""
        raise NotImplementedError
