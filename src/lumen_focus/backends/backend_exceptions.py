"""
Backend Exception Definitions

Following Lumen's development protocol.
"""


class BackendError(Exception):
    """Base class for all backend errors."""

    pass


class BackendNotInitializedError(BackendError):
    """Raised when backend is used before a successful load."""

    pass


class InferenceError(BackendError):
    """Raised when a classification call fails inside the runtime."""

    pass


class ModelLoadingError(BackendError):
    """Raised when model loading fails."""

    pass


class BackendDependencyError(BackendError):
    """Raised when attempting to use a backend with missing optional dependencies."""

    def __init__(self, runtime: str) -> None:
        """
        Initialize error with installation instructions.

        Args:
            runtime: Runtime kind identifier (e.g., "llama_cpp")
        """
        install_commands = {
            "llama_cpp": "pip install lumen-focus[llama]",
        }
        cmd = install_commands.get(runtime, "pip install lumen-focus")
        message = (
            f"Backend '{runtime}' requires optional dependencies. Install with: {cmd}"
        )
        super().__init__(message)
        self.runtime = runtime
        self.install_command = cmd
