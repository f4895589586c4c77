"""
Configuration models for Lumen-Focus.

ModelConfig describes a single load request (artifact path plus the runtime
knobs understood by llama.cpp). FocusSettings is the validated shape of the
YAML configuration file; see config_validator.load_and_validate_config.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "ConfigError",
    "ModelConfig",
    "LoggingSettings",
    "FocusSettings",
]


class ConfigError(Exception):
    """Raised when configuration is invalid."""

    pass


class ModelConfig(BaseModel):
    """
    Configuration for one model load. Immutable once constructed.

    Sampling parameters (temperature, top_k, top_p) are only meaningful to the
    llama.cpp backend; the heuristic backend ignores them.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", protected_namespaces=())

    model_path: str
    n_ctx: int = Field(default=2048, gt=0)
    n_threads: int = Field(default=4, gt=0)
    temperature: float = Field(default=0.1, ge=0)  # low for consistent labels
    top_k: int = Field(default=1, ge=0)
    top_p: float = Field(default=0.1, ge=0)
    use_mmap: bool = True
    use_mlock: bool = False
    n_gpu_layers: int = Field(default=0, ge=0)  # 0 = CPU only
    validate_artifact: bool = False

    @property
    def path(self) -> Path:
        return Path(self.model_path).expanduser()


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: str | None = None


class FocusSettings(BaseModel):
    """Top-level settings loaded from YAML."""

    model_config = ConfigDict(extra="forbid")

    runtime: Literal["auto", "llama_cpp", "heuristic"] = "auto"
    models_dir: str = "~/.lumen/focus/models"
    default_model: str = "gemma-270m-q4"
    model: ModelConfig | None = None
    result_cache_size: int = Field(default=0, ge=0)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @property
    def models_path(self) -> Path:
        return Path(self.models_dir).expanduser()
