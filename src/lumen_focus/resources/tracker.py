"""
Acquisition Progress Tracker

Drives the download → validate → commit sequence for one catalog entry as a
background task and reports every step as a LoadProgress event.

The fetcher writes to a `<target>.tmp` sibling. Only a validated file is moved
onto the target, so a failed run never touches an artifact already there.

Event guarantees within a single run:
- statuses only advance (downloading → validating → loaded), except that a
  transition to error may happen from any state and is terminal
- progress values never decrease
- downloading progress is reported from 0.0 to 1.0 in fixed increments
- exactly one terminal event (loaded or error) ends the run

There is no cancellation primitive: a caller that loses interest simply
ignores further events.

@requires: A catalog ModelInfo and a writable target path
@returns: DownloadResult (via Future or directly)
@errors: None raised; failures are reported as an error event + result
"""

from __future__ import annotations

import enum
import logging
import os
import queue
from collections.abc import Callable, Iterator
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from .catalog import ModelInfo
from .exceptions import ModelValidationError
from .platform import ArtifactFetcher, HuggingFaceFetcher
from .store import PARTIAL_DOWNLOAD_SUFFIX
from .validator import ModelFileValidator

logger = logging.getLogger(__name__)

__all__ = [
    "LoadStatus",
    "LoadProgress",
    "DownloadResult",
    "ProgressCallback",
    "AcquisitionTracker",
]


class LoadStatus(str, enum.Enum):
    """Acquisition states, declared in their advancing order."""

    NOT_STARTED = "not_started"
    DOWNLOADING = "downloading"
    VALIDATING = "validating"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


_STATUS_ORDER = {status: i for i, status in enumerate(LoadStatus)}
_TERMINAL = frozenset({LoadStatus.LOADED, LoadStatus.ERROR})


@dataclass(frozen=True)
class LoadProgress:
    """Single progress event."""

    status: LoadStatus
    progress: float  # 0.0 to 1.0
    message: str = ""
    error: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in _TERMINAL


ProgressCallback = Callable[[LoadProgress], None]


@dataclass
class DownloadResult:
    """Result of a single acquisition run.

    Attributes:
        model_id: Catalog id of the model.
        target_path: Where the artifact was (or should have been) written.
        success: Whether the artifact was fetched and validated.
        error: Error message if the run failed. None if successful.
    """

    model_id: str
    target_path: Path
    success: bool = False
    error: str | None = None


class _ProgressEmitter:
    """Enforces ordering guarantees on the events of one run."""

    def __init__(self, callback: ProgressCallback | None, increments: int) -> None:
        self._callback = callback
        self._increments = increments
        self._next_step = 1
        self.status = LoadStatus.NOT_STARTED
        self.progress = 0.0
        self.finished = False

    def emit(
        self,
        status: LoadStatus,
        progress: float,
        message: str = "",
        error: str | None = None,
    ) -> None:
        if self.finished:
            return
        if status != LoadStatus.ERROR and _STATUS_ORDER[status] < _STATUS_ORDER[self.status]:
            raise RuntimeError(f"Illegal status transition {self.status} -> {status}")

        self.status = status
        self.progress = max(self.progress, min(1.0, progress))
        self.finished = status in _TERMINAL
        event = LoadProgress(status, self.progress, message, error)

        if self._callback is None:
            return
        try:
            self._callback(event)
        except Exception as e:
            logger.warning(f"Progress callback raised, ignoring: {e}")

    def report_download(self, fraction: float) -> None:
        """Quantize a fetcher's fraction onto the fixed increments."""
        fraction = max(0.0, min(1.0, fraction))
        while (
            self._next_step <= self._increments
            and self._next_step / self._increments <= fraction + 1e-9
        ):
            percent = self._next_step * 100 // self._increments
            self.emit(
                LoadStatus.DOWNLOADING,
                self._next_step / self._increments,
                f"Downloading... {percent}%",
            )
            self._next_step += 1


class AcquisitionTracker:
    """
    Runs model acquisitions on a background executor.

    Args:
        fetcher: Transport used to materialize artifacts. Defaults to a
            HuggingFaceFetcher created on first use.
        validator: Validator applied once the artifact is on disk.
        increments: Number of fixed downloading steps between 0.0 and 1.0.
        executor: Executor to run acquisitions on; one is created if omitted.

    Example:
        >>> tracker = AcquisitionTracker(fetcher=PlaceholderFetcher())
        >>> future = tracker.start(get_default_model(), "/models/m.gguf", print)
        >>> future.result().success
        True
    """

    def __init__(
        self,
        fetcher: ArtifactFetcher | None = None,
        validator: ModelFileValidator | None = None,
        increments: int = 10,
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.validator = validator or ModelFileValidator()
        self.increments = max(1, increments)
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="lumen-focus-acquire"
        )

    def start(
        self,
        model: ModelInfo,
        target_path: str | Path,
        callback: ProgressCallback | None = None,
    ) -> Future[DownloadResult]:
        """Submit an acquisition and return immediately."""
        logger.info(f"Starting acquisition of model: {model.id}")
        return self._executor.submit(self.run, model, target_path, callback)

    def events(self, model: ModelInfo, target_path: str | Path) -> Iterator[LoadProgress]:
        """Run an acquisition and yield its events as they arrive."""
        channel: queue.Queue[LoadProgress] = queue.Queue()
        future = self.start(model, target_path, channel.put)

        while True:
            try:
                event = channel.get(timeout=0.1)
            except queue.Empty:
                if future.done() and channel.empty():
                    future.result()
                    return
                continue
            yield event
            if event.is_terminal:
                return

    def run(
        self,
        model: ModelInfo,
        target_path: str | Path,
        callback: ProgressCallback | None = None,
    ) -> DownloadResult:
        """Blocking body of an acquisition; never raises."""
        target = Path(target_path).expanduser()
        partial = target.with_name(target.name + PARTIAL_DOWNLOAD_SUFFIX)
        result = DownloadResult(model_id=model.id, target_path=target)
        emitter = _ProgressEmitter(callback, self.increments)

        try:
            emitter.emit(LoadStatus.DOWNLOADING, 0.0, "Starting download...")
            fetcher = self.fetcher or HuggingFaceFetcher()
            fetcher.fetch(model, partial, emitter.report_download)
            emitter.report_download(1.0)

            emitter.emit(LoadStatus.VALIDATING, 1.0, "Validating model file...")
            self.validator.validate_or_raise(partial)
            if not self.validator.verify_checksum(partial, model.checksum):
                raise ModelValidationError(f"Checksum mismatch for {partial}")
            os.replace(partial, target)

            result.success = True
            emitter.emit(LoadStatus.LOADED, 1.0, "Download completed")
            logger.info(f"✅ Model {model.id} ready at {target}")

        except Exception as e:
            result.success = False
            result.error = str(e) or type(e).__name__
            logger.error(f"❌ Acquisition of {model.id} failed: {result.error}")

            # Rollback: only the partial file, an existing target is kept
            if partial.exists():
                logger.info(f"🔄 Rolling back: removing {partial}")
                partial.unlink(missing_ok=True)

            emitter.emit(
                LoadStatus.ERROR, emitter.progress, "Download failed", error=result.error
            )

        return result

    def shutdown(self, wait: bool = True) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def __enter__(self) -> "AcquisitionTracker":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()
