"""
Backend factory for creating classifier backends.

The heuristic backend is always registered. The llama.cpp backend is only
registered when the optional `llama_cpp` package can be found, so importing
this module never requires the native runtime.
"""

from __future__ import annotations

import importlib.util
import logging

from ..config import ModelConfig
from .backend_exceptions import BackendDependencyError
from .base import BaseClassifierBackend, RuntimeKind
from .heuristic_backend import HeuristicBackend

logger = logging.getLogger(__name__)

AUTO = "auto"

# Module-level backend registry and initialization flag
_BACKEND_REGISTRY: dict[RuntimeKind, type[BaseClassifierBackend]] = {}
_INITIALIZED: bool = False


def register_backend(
    kind: RuntimeKind, backend_class: type[BaseClassifierBackend]
) -> None:
    """Register a backend class for a given runtime kind."""
    _BACKEND_REGISTRY[kind] = backend_class


def _ensure_backends_registered() -> None:
    """
    Register all available backends using lazy imports (idempotent).

    After the first call it returns immediately without re-scanning
    dependencies; use reload_backends() after installing the llama extra.
    """
    global _INITIALIZED

    if _INITIALIZED:
        return

    _BACKEND_REGISTRY[RuntimeKind.HEURISTIC] = HeuristicBackend

    if importlib.util.find_spec("llama_cpp") is not None:
        try:
            from .llama_backend import LlamaCppBackend

            _BACKEND_REGISTRY[RuntimeKind.LLAMA_CPP] = LlamaCppBackend
        except ImportError as e:
            logger.warning(f"llama.cpp backend unavailable due to import error: {e}")

    _INITIALIZED = True


def get_available_backends() -> list[RuntimeKind]:
    """
    Get list of available runtime kinds (cached).

    Returns:
        List of RuntimeKind values, heuristic first.
    """
    _ensure_backends_registered()
    return list(_BACKEND_REGISTRY.keys())


def is_backend_available(runtime: RuntimeKind) -> bool:
    _ensure_backends_registered()
    return runtime in _BACKEND_REGISTRY


def reload_backends() -> list[RuntimeKind]:
    """
    Reload backend registry (call after installing new dependencies).

    Returns:
        List of RuntimeKind values after reload.
    """
    global _INITIALIZED

    logger.info("Reloading backend registry...")
    _INITIALIZED = False
    _BACKEND_REGISTRY.clear()
    _ensure_backends_registered()

    available = list(_BACKEND_REGISTRY.keys())
    logger.info(
        f"Backend registry reloaded. Available backends: {[k.value for k in available]}"
    )
    return available


def select_runtime(preference: RuntimeKind | str | None = AUTO) -> RuntimeKind:
    """
    Resolve a runtime preference to a concrete runtime.

    "auto" (or None) picks llama.cpp when it is installed and the heuristic
    backend otherwise. An explicit preference is honored or rejected, never
    silently replaced.

    Raises:
        BackendDependencyError: If llama_cpp is requested but not installed
        ValueError: If the preference names no known runtime
    """
    if preference is None or preference == AUTO:
        if is_backend_available(RuntimeKind.LLAMA_CPP):
            return RuntimeKind.LLAMA_CPP
        logger.info("llama.cpp not available, using heuristic fallback backend")
        return RuntimeKind.HEURISTIC

    try:
        runtime = RuntimeKind(preference)
    except ValueError as e:
        raise ValueError(f"Unknown runtime: {preference}") from e

    if not is_backend_available(runtime):
        raise BackendDependencyError(runtime.value)
    return runtime


def create_backend(runtime: RuntimeKind, config: ModelConfig) -> BaseClassifierBackend:
    """
    Create an (unloaded) backend instance for the given runtime.

    Raises:
        BackendDependencyError: If the runtime requires optional dependencies
            that are not installed
    """
    _ensure_backends_registered()

    if runtime not in _BACKEND_REGISTRY:
        raise BackendDependencyError(runtime.value)

    backend_class = _BACKEND_REGISTRY[runtime]
    return backend_class(config)
