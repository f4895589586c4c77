"""
Model resources: catalog, artifact validation, acquisition and local storage.
"""

from .catalog import (
    MODEL_CATALOG,
    ModelInfo,
    check_available_memory,
    format_file_size,
    get_available_model_names,
    get_available_models,
    get_default_model,
    get_model,
    get_model_download_info,
    get_model_memory_requirement,
    get_recommended_model_path,
)
from .exceptions import (
    DownloadError,
    ModelNotFoundError,
    ModelValidationError,
    PlatformUnavailableError,
    ResourceError,
)
from .platform import (
    ArtifactFetcher,
    HuggingFaceFetcher,
    PlaceholderFetcher,
    create_placeholder_model,
)
from .store import ModelStore
from .tracker import AcquisitionTracker, DownloadResult, LoadProgress, LoadStatus
from .validator import (
    GGUF_MAGIC,
    MIN_MODEL_FILE_SIZE,
    ModelFileValidator,
    ValidationFailure,
    ValidationReport,
    validate_model_file,
)

__all__ = [
    # Catalog
    "MODEL_CATALOG",
    "ModelInfo",
    "get_available_models",
    "get_available_model_names",
    "get_model",
    "get_default_model",
    "get_recommended_model_path",
    "get_model_memory_requirement",
    "check_available_memory",
    "format_file_size",
    "get_model_download_info",
    # Validation
    "GGUF_MAGIC",
    "MIN_MODEL_FILE_SIZE",
    "ModelFileValidator",
    "ValidationFailure",
    "ValidationReport",
    "validate_model_file",
    # Acquisition
    "ArtifactFetcher",
    "HuggingFaceFetcher",
    "PlaceholderFetcher",
    "create_placeholder_model",
    "AcquisitionTracker",
    "DownloadResult",
    "LoadProgress",
    "LoadStatus",
    "ModelStore",
    # Exceptions
    "ResourceError",
    "ModelNotFoundError",
    "ModelValidationError",
    "DownloadError",
    "PlatformUnavailableError",
]
