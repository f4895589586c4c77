"""
Model Lifecycle Management Module

This module provides the `ModelLifecycleManager` class, the single owner of
the active classification backend. It loads and unloads a model artifact,
routes classification requests to the backend (or rejects them when nothing
is loaded) and applies caller-supplied context to the verdicts.

States:
    UNLOADED → LOADING → LOADED → UNLOADED
    A failed load returns to UNLOADED and is reported as False, with the
    error recorded in `last_error` / `last_error_kind`.

Concurrency:
    load(), unload() and clear_cache() are serialized by a re-entrant lock.
    classify() only snapshots the backend reference under that lock, so
    classifications run in parallel once a model is loaded.

Dependencies:
    - A backend implementing BaseClassifierBackend, created by the factory
    - ModelFileValidator for optional pre-load artifact validation
"""

from __future__ import annotations

import enum
import logging
import threading
import time
from collections import OrderedDict

from .backends import BaseClassifierBackend, RuntimeKind, create_backend
from .backends.backend_exceptions import BackendError
from .backends.base import BackendInfo
from .backends.factory import AUTO, is_backend_available, select_runtime
from .classifier.context import apply_context_adjustments
from .config import ModelConfig
from .models import ClassificationContext, ClassificationResult, ErrorKind
from .resources.exceptions import ModelValidationError
from .resources.validator import ModelFileValidator

logger = logging.getLogger(__name__)

__all__ = ["ManagerState", "ModelLifecycleManager"]

NOT_LOADED_MESSAGE = "model not loaded"
EMPTY_CONTENT_MESSAGE = "empty content"
WARM_UP_TEXT = "This is a warm-up classification to initialize the model."


class ManagerState(str, enum.Enum):
    UNLOADED = "unloaded"
    LOADING = "loading"
    LOADED = "loaded"


class ModelLifecycleManager:
    """
    Owns at most one loaded backend and serves classifications from it.

    Args:
        runtime: "auto", "llama_cpp", "heuristic" or a RuntimeKind. "auto"
            prefers llama.cpp when installed.
        validator: Validator used when a ModelConfig asks for
            `validate_artifact`.
        result_cache_size: Capacity of the LRU cache of successful results;
            0 disables caching.

    Raises:
        BackendDependencyError: If llama_cpp is requested but not installed

    Example:
        >>> with ModelLifecycleManager(runtime="heuristic") as manager:
        ...     _ = manager.load(ModelConfig(model_path="/models/gemma.gguf"))
        ...     manager.classify("A tutorial on sorting algorithms").is_productive
        True
    """

    def __init__(
        self,
        runtime: RuntimeKind | str | None = AUTO,
        validator: ModelFileValidator | None = None,
        result_cache_size: int = 0,
    ) -> None:
        self._runtime: RuntimeKind = select_runtime(runtime)
        self._validator = validator or ModelFileValidator()

        self._lock = threading.RLock()
        self._state = ManagerState.UNLOADED
        self._backend: BaseClassifierBackend | None = None
        self._config: ModelConfig | None = None

        self.last_error: str | None = None
        self.last_error_kind: ErrorKind | None = None
        self._load_time: float | None = None

        self._cache_size = max(0, result_cache_size)
        self._cache: OrderedDict[
            tuple[str, ClassificationContext | None], ClassificationResult
        ] = OrderedDict()
        self._cache_lock = threading.Lock()

        logger.info(f"Model lifecycle manager created (runtime={self._runtime.value})")

    # ---------- Lifecycle ----------

    def load(self, config: ModelConfig) -> bool:
        """
        Load the artifact described by `config`, replacing any loaded model.

        @requires: config.model_path points at an existing artifact
        @returns: True when the manager ends up LOADED, False otherwise
        @errors: None raised; see last_error / last_error_kind
        """
        with self._lock:
            if self._state == ManagerState.LOADED:
                logger.info("Unloading current model before loading a new one")
                self.unload()

            self._state = ManagerState.LOADING
            self.last_error = None
            self.last_error_kind = None
            t0 = time.time()

            try:
                if config.validate_artifact:
                    self._validator.validate_or_raise(config.path)

                backend = create_backend(self._runtime, config)
                backend.load()

            except ModelValidationError as e:
                return self._fail_load(ErrorKind.VALIDATION_FAILURE, e)
            except BackendError as e:
                return self._fail_load(ErrorKind.LOAD_FAILURE, e)
            except Exception as e:
                return self._fail_load(ErrorKind.INTERNAL_FAULT, e)

            self._backend = backend
            self._config = config
            self._state = ManagerState.LOADED
            self._load_time = time.time() - t0
            logger.info(
                f"✅ Model loaded in {self._load_time:.2f}s ({backend.describe()})"
            )
            return True

    def _fail_load(self, kind: ErrorKind, error: Exception) -> bool:
        self.last_error = str(error) or type(error).__name__
        self.last_error_kind = kind
        self._state = ManagerState.UNLOADED
        self._backend = None
        self._config = None
        logger.error(f"❌ Failed to load model ({kind.value}): {self.last_error}")
        return False

    def unload(self) -> None:
        """Release the loaded backend. Always leaves the manager UNLOADED."""
        with self._lock:
            backend, self._backend = self._backend, None
            self._config = None
            self._state = ManagerState.UNLOADED
            self._clear_result_cache()

            if backend is None:
                return

            try:
                backend.unload()
            except Exception as e:
                logger.error(f"Error during backend unload: {e}")
            logger.info("Model unloaded")

    def is_loaded(self) -> bool:
        return self._state == ManagerState.LOADED

    @property
    def state(self) -> ManagerState:
        return self._state

    @property
    def runtime(self) -> RuntimeKind:
        return self._runtime

    @property
    def load_time(self) -> float | None:
        return self._load_time

    # ---------- Classification ----------

    def classify(
        self, text: str, context: ClassificationContext | None = None
    ) -> ClassificationResult:
        """
        Classify `text`, adjusting the verdict with `context` when given.

        Never raises: every failure is returned as a result with
        `success=False` and an `error_kind`.
        """
        t0 = time.perf_counter()

        with self._lock:
            backend = self._backend if self._state == ManagerState.LOADED else None

        if backend is None:
            return ClassificationResult.failure(
                ErrorKind.NOT_LOADED,
                NOT_LOADED_MESSAGE,
                processing_time=time.perf_counter() - t0,
            )

        if not text:
            return ClassificationResult.failure(
                ErrorKind.EMPTY_INPUT,
                EMPTY_CONTENT_MESSAGE,
                processing_time=time.perf_counter() - t0,
            )

        cache_key = (text, context)
        cached = self._cache_get(cache_key)
        if cached is not None:
            return cached.with_processing_time(time.perf_counter() - t0)

        try:
            result = backend.classify(text)
            if context is not None:
                result = apply_context_adjustments(result, context)
        except Exception as e:
            logger.error(f"Classification failed: {e}")
            return ClassificationResult.failure(
                ErrorKind.INTERNAL_FAULT,
                str(e) or type(e).__name__,
                processing_time=time.perf_counter() - t0,
            )

        result = result.with_processing_time(time.perf_counter() - t0)
        if result.success:
            self._cache_put(cache_key, result)
        return result

    def warm_up(self) -> None:
        """Run one throwaway classification; a no-op unless loaded."""
        if not self.is_loaded():
            return
        try:
            result = self.classify(WARM_UP_TEXT)
            if not result.success:
                logger.warning(f"Warm-up classification failed: {result.error}")
            else:
                logger.info("Model warm-up completed")
        except Exception as e:
            logger.warning(f"Warm-up failed: {e}")

    # ---------- Result cache ----------

    def _cache_get(
        self, key: tuple[str, ClassificationContext | None]
    ) -> ClassificationResult | None:
        if self._cache_size == 0:
            return None
        with self._cache_lock:
            result = self._cache.get(key)
            if result is not None:
                self._cache.move_to_end(key)
            return result

    def _cache_put(
        self, key: tuple[str, ClassificationContext | None], result: ClassificationResult
    ) -> None:
        if self._cache_size == 0:
            return
        with self._cache_lock:
            self._cache[key] = result
            self._cache.move_to_end(key)
            while len(self._cache) > self._cache_size:
                self._cache.popitem(last=False)

    def _clear_result_cache(self) -> None:
        with self._cache_lock:
            self._cache.clear()

    @property
    def cached_results(self) -> int:
        with self._cache_lock:
            return len(self._cache)

    def clear_cache(self) -> None:
        """Drop cached results and any runtime-side cache."""
        with self._lock:
            self._clear_result_cache()
            if self._backend is not None:
                try:
                    self._backend.clear_cache()
                except Exception as e:
                    logger.warning(f"Backend cache clear failed: {e}")

    # ---------- Metadata ----------

    def memory_usage(self) -> int:
        """Bytes attributed to the loaded model; 0 when unloaded."""
        with self._lock:
            backend = self._backend
        return backend.memory_usage() if backend is not None else 0

    def model_info(self) -> str:
        with self._lock:
            backend = self._backend
        if backend is None:
            return "Model not loaded"
        return backend.describe()

    def backend_info(self) -> BackendInfo | None:
        with self._lock:
            backend = self._backend
        return backend.get_info() if backend is not None else None

    @staticmethod
    def is_real_backend_available() -> bool:
        """Whether the llama.cpp runtime is installed."""
        return is_backend_available(RuntimeKind.LLAMA_CPP)

    # ---------- Context manager ----------

    def __enter__(self) -> "ModelLifecycleManager":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unload()
