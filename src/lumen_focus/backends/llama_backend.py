"""
LlamaCppBackend: GGUF classification through llama-cpp-python.

The model is asked to answer with a single label. Answers are parsed by
substring ("UNPRODUCTIVE" is checked first since it contains "PRODUCTIVE");
an answer carrying neither label is resolved by keyword balance over the
prepared content.

A llama_cpp.Llama handle is not thread-safe: every call into it is made under
the backend lock, so concurrent classify() calls run one completion at a time.
"""

from __future__ import annotations

import logging
import threading
import time

from typing_extensions import override

try:
    import llama_cpp
except ImportError:
    llama_cpp = None

from ..classifier.text import generate_classification_prompt, normalize_text
from ..config import ModelConfig
from ..models import ClassificationResult
from .backend_exceptions import (
    BackendDependencyError,
    BackendNotInitializedError,
    InferenceError,
    ModelLoadingError,
)
from .base import BackendInfo, BaseClassifierBackend, RuntimeKind

logger = logging.getLogger(__name__)

LLM_CONFIDENCE = 0.85
MAX_ANSWER_TOKENS = 4

FALLBACK_PRODUCTIVE_KEYWORDS = (
    "learn",
    "education",
    "research",
    "study",
    "analysis",
    "work",
    "project",
    "development",
    "programming",
    "science",
    "technology",
    "business",
)

FALLBACK_UNPRODUCTIVE_KEYWORDS = (
    "funny",
    "meme",
    "viral",
    "trending",
    "celebrity",
    "gossip",
    "drama",
    "entertainment",
    "game",
    "fun",
    "party",
    "social",
)


def parse_answer(answer: str) -> bool | None:
    """Map raw completion text to a verdict; None when no label is present."""
    upper = answer.upper()
    if "UNPRODUCTIVE" in upper:
        return False
    if "PRODUCTIVE" in upper:
        return True
    return None


def keyword_balance(content: str) -> tuple[bool, float]:
    """
    Resolve an unparseable answer from the content itself.

    @returns: (is_productive, confidence). Ties lean productive; confidence is
        the normalized margin, or 0.5 when no keyword matched.
    """
    text = normalize_text(content)
    productive = sum(1 for kw in FALLBACK_PRODUCTIVE_KEYWORDS if kw in text)
    unproductive = sum(1 for kw in FALLBACK_UNPRODUCTIVE_KEYWORDS if kw in text)
    total = productive + unproductive
    confidence = abs(productive - unproductive) / total if total > 0 else 0.5
    return productive >= unproductive, confidence


class LlamaCppBackend(BaseClassifierBackend):
    """Real inference backend wrapping llama_cpp.Llama."""

    runtime = RuntimeKind.LLAMA_CPP

    def __init__(self, config: ModelConfig) -> None:
        if llama_cpp is None:
            raise BackendDependencyError(RuntimeKind.LLAMA_CPP.value)
        super().__init__(config)
        self._llm = None
        self._lock = threading.Lock()

    @override
    def load(self) -> None:
        if self._initialized:
            return

        path = self.config.path
        logger.info(f"Loading model from: {path}")
        if not path.is_file():
            raise ModelLoadingError(f"Model file not found: {path}")

        with self._lock:
            try:
                self._llm = llama_cpp.Llama(
                    model_path=str(path),
                    n_ctx=self.config.n_ctx,
                    n_threads=self.config.n_threads,
                    n_gpu_layers=self.config.n_gpu_layers,
                    use_mmap=self.config.use_mmap,
                    use_mlock=self.config.use_mlock,
                    verbose=False,
                )
            except Exception as e:
                self._llm = None
                raise ModelLoadingError(f"Failed to load model: {path}: {e}") from e
            self._initialized = True

        logger.info("✅ llama.cpp model loaded successfully")

    @override
    def unload(self) -> None:
        with self._lock:
            llm, self._llm = self._llm, None
            self._initialized = False
            if llm is None:
                return

            close = getattr(llm, "close", None)
            if callable(close):
                try:
                    close()
                except Exception as e:
                    logger.error(f"Error while releasing llama.cpp model: {e}")
        logger.info("llama.cpp model unloaded")

    @override
    def classify(self, text: str) -> ClassificationResult:
        start = time.perf_counter()
        prompt = generate_classification_prompt(text)
        with self._lock:
            llm = self._llm
            if not self._initialized or llm is None:
                raise BackendNotInitializedError("LlamaCppBackend used before load()")
            try:
                completion = llm.create_completion(
                    prompt,
                    max_tokens=MAX_ANSWER_TOKENS,
                    temperature=self.config.temperature,
                    top_k=self.config.top_k,
                    top_p=self.config.top_p,
                )
                answer = completion["choices"][0]["text"]
            except Exception as e:
                raise InferenceError(f"llama.cpp completion failed: {e}") from e

        logger.debug(f"Model answer: {answer!r}")
        verdict = parse_answer(answer)
        if verdict is not None:
            is_productive, confidence = verdict, LLM_CONFIDENCE
            reason = "llm_classification"
        else:
            is_productive, confidence = keyword_balance(text)
            reason = "llama_heuristic_fallback"

        return ClassificationResult(
            is_productive=is_productive,
            confidence=confidence,
            reason=reason,
            processing_time=time.perf_counter() - start,
        )

    @override
    def clear_cache(self) -> None:
        with self._lock:
            reset = getattr(self._llm, "reset", None)
            if callable(reset):
                reset()

    @override
    def memory_usage(self) -> int:
        with self._lock:
            llm = self._llm
            if llm is None:
                return 0
            try:
                return int(llm.save_state().llama_state_size)
            except Exception as e:
                logger.warning(f"Unable to query llama.cpp state size: {e}")
                return 0

    @override
    def get_info(self) -> BackendInfo:
        return BackendInfo(
            runtime=self.runtime.value,
            model_path=str(self.config.path),
            n_ctx=self.config.n_ctx,
            n_threads=self.config.n_threads,
            n_gpu_layers=self.config.n_gpu_layers,
            version=getattr(llama_cpp, "__version__", None),
        )

    @override
    def describe(self) -> str:
        return f"llama.cpp model loaded: {self.config.model_path}"
