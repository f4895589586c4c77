"""
Resource Exception Definitions

Following Lumen's contract: each layer defines its own error types.
"""


class ResourceError(Exception):
    """Base exception for all model resource operations."""

    pass


class ModelNotFoundError(ResourceError):
    """
    Raised when a model id is not present in the catalog.

    @context: Catalog lookup
    """

    pass


class ModelValidationError(ResourceError):
    """
    Raised when a model artifact fails validation (missing, too small, bad magic).

    @context: Model integrity checks
    """

    pass


class DownloadError(ResourceError):
    """
    Raised when an artifact cannot be fetched.

    @context: Platform fetcher operations
    """

    pass


class PlatformUnavailableError(ResourceError):
    """
    Raised when the requested platform SDK is not installed.

    @context: Platform fetcher initialization
    """

    pass
