"""
Platform Fetchers for Model Artifacts

This module provides the transports that materialize a catalog entry at a
target path for the Acquisition Tracker:

- HuggingFaceFetcher: downloads the GGUF file through huggingface_hub
- PlaceholderFetcher: writes a minimal GGUF-shaped file in simulated steps,
  for offline setups and tests

Fetchers report download progress as a fraction in [0, 1] through a callback;
the tracker quantizes those reports into fixed progress events.

@requires: huggingface_hub for HuggingFaceFetcher
@returns: Path to the materialized artifact
@errors: DownloadError, PlatformUnavailableError
"""

from __future__ import annotations

import abc
import logging
import shutil
import time
from collections.abc import Callable
from pathlib import Path

from .catalog import ModelInfo
from .exceptions import DownloadError, PlatformUnavailableError
from .validator import GGUF_MAGIC, MIN_MODEL_FILE_SIZE

logger = logging.getLogger(__name__)

ProgressReporter = Callable[[float], None]

__all__ = [
    "ProgressReporter",
    "ArtifactFetcher",
    "HuggingFaceFetcher",
    "PlaceholderFetcher",
    "create_placeholder_model",
]


def create_placeholder_model(path: str | Path) -> bool:
    """Write a minimal file that passes GGUF validation (magic + 1 KiB padding)."""
    path = Path(path)
    logger.debug(f"Creating placeholder model at: {path}")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(GGUF_MAGIC)
            f.write(bytes(MIN_MODEL_FILE_SIZE))
    except OSError as e:
        logger.error(f"Cannot create placeholder model file: {e}")
        return False
    return True


class ArtifactFetcher(abc.ABC):
    """Transport that materializes a catalog entry on local disk."""

    @abc.abstractmethod
    def fetch(self, model: ModelInfo, target: Path, report: ProgressReporter) -> Path:
        """
        Materialize `model` at `target`.

        Raises:
            DownloadError: If the artifact cannot be fetched.
        """
        raise NotImplementedError


class HuggingFaceFetcher(ArtifactFetcher):
    """
    Fetch artifacts from HuggingFace Hub.

    Contract:
    @requires: huggingface_hub installed; catalog URL in resolve form
    @returns: Path to the downloaded file at the requested target
    @errors: DownloadError, PlatformUnavailableError
    """

    def __init__(self, force: bool = False) -> None:
        self.force = force
        self._check_availability()

    def _check_availability(self) -> None:
        try:
            import huggingface_hub

            self._hf_hub = huggingface_hub
        except ImportError:
            raise PlatformUnavailableError(
                "HuggingFace Hub SDK not available. "
                "Install with: pip install huggingface_hub"
            )

    def fetch(self, model: ModelInfo, target: Path, report: ProgressReporter) -> Path:
        repo_id = model.repo_id
        if repo_id is None:
            raise DownloadError(f"Unsupported source locator: {model.url}")

        report(0.0)
        try:
            # Fetched into the hub cache, then copied out to the requested path
            downloaded = self._hf_hub.hf_hub_download(
                repo_id=repo_id,
                filename=model.repo_filename,
                force_download=self.force,
            )
        except Exception as e:
            raise DownloadError(f"Failed to download {repo_id}: {e}") from e

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy(downloaded, target)
        except OSError as e:
            raise DownloadError(f"Failed to copy {downloaded} to {target}: {e}") from e
        report(1.0)
        return target


class PlaceholderFetcher(ArtifactFetcher):
    """Simulated download that writes a placeholder GGUF file."""

    def __init__(self, steps: int = 10, delay: float = 0.0) -> None:
        self.steps = max(1, steps)
        self.delay = delay

    def fetch(self, model: ModelInfo, target: Path, report: ProgressReporter) -> Path:
        for i in range(self.steps + 1):
            if self.delay:
                time.sleep(self.delay)
            report(i / self.steps)

        if not create_placeholder_model(target):
            raise DownloadError("Failed to create model file")
        return target
