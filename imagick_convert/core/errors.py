"""Exception types raised by imagick-convert."""

from typing import List, Tuple

from .types import ExecutionResult


class ImagickConvertError(Exception):
    """Base class for all package errors."""


class ResourceUnavailable(ImagickConvertError):
    """A source reference could not be fetched or copied to a local file."""

    def __init__(self, reference: str, reason: str):
        super().__init__(f"Cannot make '{reference}' available locally: {reason}")
        self.reference = reference
        self.reason = reason


class ExternalToolFailure(ImagickConvertError):
    """The external tool exited non-zero or could not be launched."""

    def __init__(self, result: ExecutionResult):
        program = result.args[0] if result.args else "<unknown>"
        detail = result.stderr.strip() or result.error
        message = f"{program} failed ({result})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.result = result


class TempCleanupFailure(ImagickConvertError):
    """
    One or more temp files could not be deleted.

    Collected during teardown and handed back to the caller instead of
    being raised, so every registered file still gets its deletion attempt.
    """

    def __init__(self, failures: List[Tuple[str, OSError]]):
        paths = ", ".join(path for path, _ in failures)
        super().__init__(f"Failed to delete {len(failures)} temp file(s): {paths}")
        self.failures = failures
