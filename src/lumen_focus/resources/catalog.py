"""
Model Catalog

Static registry of downloadable GGUF artifacts plus the sizing helpers used to
present choices and estimate resource requirements before a load.

@requires: Nothing; entries are process-wide constants
@returns: ModelInfo entries and size/memory estimates
@errors: ModelNotFoundError
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ModelNotFoundError

__all__ = [
    "ModelInfo",
    "MODEL_CATALOG",
    "get_available_models",
    "get_available_model_names",
    "get_model",
    "get_default_model",
    "get_recommended_model_path",
    "get_model_memory_requirement",
    "check_available_memory",
    "format_file_size",
    "get_model_download_info",
]

MIB = 1024 * 1024
GIB = 1024 * MIB

MEMORY_OVERHEAD_FACTOR = 1.3
DEFAULT_AVAILABLE_MEMORY = 2 * GIB


class ModelInfo(BaseModel):
    """Catalog entry describing one downloadable model artifact.

    Attributes:
        id: Stable catalog identifier (e.g., "gemma-270m-q4").
        url: Source locator of the artifact.
        filename: File name the artifact is stored under.
        size_bytes: Approximate artifact size.
        checksum: Hex SHA-256 digest; empty means unverified.
        description: Human-readable description.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    url: str
    filename: str
    size_bytes: int = Field(ge=0)
    checksum: str = ""
    description: str = ""

    @property
    def repo_id(self) -> str | None:
        """Hugging Face repo id for `.../<owner>/<repo>/resolve/<rev>/<file>` URLs."""
        parts = urlparse(self.url).path.strip("/").split("/")
        if len(parts) >= 4 and parts[2] == "resolve":
            return f"{parts[0]}/{parts[1]}"
        return None

    @property
    def repo_filename(self) -> str:
        """Path of the artifact inside its repository."""
        parts = urlparse(self.url).path.strip("/").split("/")
        if len(parts) >= 5 and parts[2] == "resolve":
            return "/".join(parts[4:])
        return self.filename

    def as_dict(self) -> dict[str, object]:
        return self.model_dump()


MODEL_CATALOG: tuple[ModelInfo, ...] = (
    ModelInfo(
        id="gemma-270m-q4",
        url="https://huggingface.co/unsloth/gemma-3-270m-it-GGUF/resolve/main/gemma-3-270m-it-Q4_K_M.gguf",
        filename="gemma-3-270m-it-Q4_K_M.gguf",
        size_bytes=150 * MIB,
        description="Gemma 3 270M - Optimized for mobile inference",
    ),
    ModelInfo(
        id="qwen2-0.5b-q4",
        url="https://huggingface.co/Qwen/Qwen2-0.5B-Instruct-GGUF/resolve/main/qwen2-0_5b-instruct-q4_k_m.gguf",
        filename="qwen2-0_5b-instruct-q4_k_m.gguf",
        size_bytes=350 * MIB,
        description="Qwen2 0.5B - Lightweight instruction model",
    ),
    ModelInfo(
        id="gemma-2b-q4",
        url="https://huggingface.co/unsloth/gemma-3-2b-it-GGUF/resolve/main/gemma-3-2b-it-Q4_K_M.gguf",
        filename="gemma-3-2b-it-Q4_K_M.gguf",
        size_bytes=1200 * MIB,
        description="Gemma 3 2B - Higher quality but larger model",
    ),
)


def get_available_models() -> list[ModelInfo]:
    return list(MODEL_CATALOG)


def get_available_model_names() -> list[str]:
    return [model.id for model in MODEL_CATALOG]


def get_model(model_id: str) -> ModelInfo:
    """Look up a catalog entry by id.

    Raises:
        ModelNotFoundError: If the id is not in the catalog.
    """
    for model in MODEL_CATALOG:
        if model.id == model_id:
            return model
    raise ModelNotFoundError(f"Model not found: {model_id}")


def get_default_model() -> ModelInfo:
    """The first (smallest) catalog entry."""
    return MODEL_CATALOG[0]


def get_recommended_model_path(base_dir: str | Path) -> Path:
    return Path(base_dir).expanduser() / get_default_model().filename


def get_model_memory_requirement(model: ModelInfo) -> int:
    """Estimated resident memory for a loaded model (file size plus overhead)."""
    return int(model.size_bytes * MEMORY_OVERHEAD_FACTOR)


def check_available_memory(
    required_bytes: int, available_bytes: int | None = None
) -> bool:
    """Whether `required_bytes` fits below the available budget (2 GiB by default)."""
    budget = DEFAULT_AVAILABLE_MEMORY if available_bytes is None else available_bytes
    return required_bytes < budget


def format_file_size(size_bytes: int) -> str:
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < MIB:
        return f"{size_bytes // 1024} KB"
    if size_bytes < GIB:
        return f"{size_bytes // MIB} MB"
    return f"{size_bytes // GIB} GB"


def get_model_download_info(model_id: str) -> str:
    try:
        model = get_model(model_id)
    except ModelNotFoundError:
        return f"Model not found: {model_id}"
    return f"{model.description} (Size: {format_file_size(model.size_bytes)})"
