"""
Backends package for content classification runtimes.

Exports:
- BaseClassifierBackend: abstract interface for runtime-agnostic backends
- BackendInfo: metadata container describing runtime and model settings
- RuntimeKind: enumeration of supported runtime families
- HeuristicBackend: keyword-based fallback, always available
- create_backend / select_runtime: factory helpers

LlamaCppBackend is not imported here; the factory loads it lazily when the
llama_cpp package is installed.
"""

from .backend_exceptions import (
    BackendDependencyError,
    BackendError,
    BackendNotInitializedError,
    InferenceError,
    ModelLoadingError,
)
from .base import BackendInfo, BaseClassifierBackend, RuntimeKind
from .factory import (
    create_backend,
    get_available_backends,
    reload_backends,
    select_runtime,
)
from .heuristic_backend import HeuristicBackend

__all__ = [
    "BaseClassifierBackend",
    "BackendInfo",
    "RuntimeKind",
    "HeuristicBackend",
    "BackendError",
    "BackendNotInitializedError",
    "BackendDependencyError",
    "InferenceError",
    "ModelLoadingError",
    "create_backend",
    "get_available_backends",
    "reload_backends",
    "select_runtime",
]
