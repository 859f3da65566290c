# error taxonomy shared by the provider adapter and the orchestrator
# every vendor failure is turned into a ClassifiedError with an explicit kind,
# so callers branch on .kind instead of probing the error's shape

from enum import Enum
from typing import Any, Dict, Optional


class ProviderError(Exception):
    pass


class ErrorKind(str, Enum):
    QUOTA = "quota"
    AUTH = "auth"
    NETWORK = "network"
    UNKNOWN = "unknown"


class ClassifiedError(ProviderError):
    """A normalized {kind, message, suggestion} failure."""

    def __init__(self, kind: ErrorKind, message: str, suggestion: str) -> None:
        super().__init__(message)
        self.kind = ErrorKind(kind)
        self.message = message
        self.suggestion = suggestion

    @property
    def needs_reconfigure(self) -> bool:
        # credentials screen is the fix for these two
        return self.kind in (ErrorKind.AUTH, ErrorKind.QUOTA)

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.kind.value, "message": self.message, "suggestion": self.suggestion}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassifiedError):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self.kind, self.message, self.suggestion))

    def __repr__(self) -> str:
        return f"ClassifiedError(kind={self.kind.value!r}, message={self.message!r})"


class ArtifactParseError(ValueError):
    pass


def not_configured() -> ClassifiedError:
    return ClassifiedError(
        ErrorKind.AUTH,
        "AI service not configured",
        "Please check your API key in Settings.",
    )


def connection_failed() -> ClassifiedError:
    return ClassifiedError(
        ErrorKind.NETWORK,
        "Connection failed",
        "Please check your internet connection and try again.",
    )


def _vendor_message(body: Any) -> str:
    if not isinstance(body, dict):
        return "Unknown error"
    err = body.get("error")
    if isinstance(err, dict) and err.get("message"):
        return str(err["message"])
    if body.get("message"):
        return str(body["message"])
    return "Unknown error"


def classify_error(status: int, body: Optional[Any]) -> ClassifiedError:
    """
    Map an HTTP status + vendor error body to a ClassifiedError.
    Pure function: same (status, body) always gives the same result.
    """
    vendor_message = _vendor_message(body)

    if status == 401:
        return ClassifiedError(
            ErrorKind.AUTH,
            "Invalid API key",
            "Please check your API key in Settings and make sure it's correct.",
        )
    if status == 429:
        if "quota" in vendor_message or "billing" in vendor_message:
            return ClassifiedError(
                ErrorKind.QUOTA,
                "API quota exceeded",
                "Please check your billing details or try a different API provider.",
            )
        return ClassifiedError(
            ErrorKind.QUOTA,
            "Rate limit exceeded",
            "Please wait a moment and try again.",
        )
    if status in (500, 502, 503):
        return ClassifiedError(
            ErrorKind.NETWORK,
            "Service temporarily unavailable",
            "Please try again in a few moments.",
        )
    return ClassifiedError(
        ErrorKind.UNKNOWN,
        vendor_message,
        "Please try again or contact support if the issue persists.",
    )
