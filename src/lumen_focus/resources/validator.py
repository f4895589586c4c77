"""
Validator for GGUF model artifacts.

Checks that a candidate file exists, is readable, meets the minimum size and
starts with the GGUF magic marker. Deeper structural parsing is left to the
inference runtime. Files are only ever opened for reading.
"""

from __future__ import annotations

import enum
import hashlib
import logging
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ModelValidationError

logger = logging.getLogger(__name__)

__all__ = [
    "GGUF_MAGIC",
    "MIN_MODEL_FILE_SIZE",
    "ValidationFailure",
    "ValidationReport",
    "ModelFileValidator",
    "validate_model_file",
]

GGUF_MAGIC = b"GGUF"
MIN_MODEL_FILE_SIZE = 1024
_CHUNK_SIZE = 1024 * 1024


class ValidationFailure(str, enum.Enum):
    """Distinct reasons a file is rejected."""

    MISSING = "file missing"
    UNREADABLE = "file unreadable"
    TOO_SMALL = "file too small"
    BAD_MAGIC = "bad magic"


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of inspecting a single file."""

    path: Path
    valid: bool
    size_bytes: int = 0
    failure: ValidationFailure | None = None
    message: str = ""


class ModelFileValidator:
    """Validator for binary model files."""

    def __init__(
        self, magic: bytes = GGUF_MAGIC, min_size: int = MIN_MODEL_FILE_SIZE
    ) -> None:
        self.magic = magic
        self.min_size = min_size

    def inspect(self, path: str | Path) -> ValidationReport:
        """
        Inspect a candidate model file.

        Args:
            path: Path to the artifact

        Returns:
            ValidationReport; `failure` names the first failing check.
        """
        path = Path(path)
        logger.debug(f"Validating model file: {path}")

        if not path.is_file():
            return self._reject(path, ValidationFailure.MISSING, 0, "Model file not found")

        try:
            size = path.stat().st_size
            with open(path, "rb") as f:
                header = f.read(len(self.magic))
        except OSError as e:
            return self._reject(
                path, ValidationFailure.UNREADABLE, 0, f"Cannot open model file: {e}"
            )

        if size < self.min_size:
            return self._reject(
                path,
                ValidationFailure.TOO_SMALL,
                size,
                f"Model file too small: {size} bytes",
            )

        if header != self.magic:
            return self._reject(
                path,
                ValidationFailure.BAD_MAGIC,
                size,
                f"Invalid magic number: {header!r}",
            )

        logger.debug(f"Model file validation passed: {size} bytes")
        return ValidationReport(path=path, valid=True, size_bytes=size)

    def _reject(
        self, path: Path, failure: ValidationFailure, size: int, message: str
    ) -> ValidationReport:
        logger.error(f"{message} ({path})")
        return ValidationReport(
            path=path, valid=False, size_bytes=size, failure=failure, message=message
        )

    def validate(self, path: str | Path) -> bool:
        return self.inspect(path).valid

    def validate_or_raise(self, path: str | Path) -> ValidationReport:
        """
        Raises:
            ModelValidationError: If the file fails any check.
        """
        report = self.inspect(path)
        if not report.valid:
            raise ModelValidationError(f"{report.message}: {report.path}")
        return report

    def describe(self, path: str | Path) -> str:
        report = self.inspect(path)
        if not report.valid:
            return "Invalid model file"
        return f"GGUF Model: {report.path} ({report.size_bytes // 1024 // 1024} MB)"

    @staticmethod
    def verify_checksum(path: str | Path, expected: str) -> bool:
        """
        Compare the file's SHA-256 digest with `expected`.

        An empty `expected` means the catalog entry is unverified and passes.
        """
        if not expected:
            return True

        digest = hashlib.sha256()
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
                digest.update(chunk)

        actual = digest.hexdigest()
        if actual != expected.lower():
            logger.error(f"Checksum mismatch for {path}: {actual} != {expected}")
            return False
        return True


def validate_model_file(path: str | Path) -> bool:
    """
    Convenience function to validate a GGUF artifact.
    Args:
        path: Path to the model file
    Returns:
        True if the file passes every check
    """
    return ModelFileValidator().validate(path)
