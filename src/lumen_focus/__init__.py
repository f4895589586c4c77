"""
Lumen Focus - on-device productive/unproductive content classification.

Typical use:

    from lumen_focus import ModelConfig, ModelLifecycleManager, build_context

    manager = ModelLifecycleManager()
    if manager.load(ModelConfig(model_path="~/.lumen/focus/models/m.gguf")):
        text = "How to write a binary search"
        result = manager.classify(text, build_context(text, "com.linkedin.android"))
"""

from importlib.metadata import PackageNotFoundError, version

from .classifier import (
    apply_context_adjustments,
    build_context,
    classify_with_context,
    classify_with_heuristics,
    detect_category,
    get_content_category_name,
)
from .config import ConfigError, FocusSettings, ModelConfig
from .manager import ManagerState, ModelLifecycleManager
from .models import (
    ClassificationContext,
    ClassificationResult,
    ContentCategory,
    ErrorKind,
)

try:
    __version__ = version("lumen-focus")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "ModelLifecycleManager",
    "ManagerState",
    "ModelConfig",
    "FocusSettings",
    "ConfigError",
    "ClassificationContext",
    "ClassificationResult",
    "ContentCategory",
    "ErrorKind",
    "classify_with_heuristics",
    "classify_with_context",
    "apply_context_adjustments",
    "build_context",
    "detect_category",
    "get_content_category_name",
]
