"""Media error types."""

from typing import Any, Dict

from coursition.errors import DomainError, WireError


# API boundary errors

class MediaEmpty(WireError):
    status_code = 422


class MediaNotFound(WireError):
    status_code = 404


# Internal domain errors

class MediaEmptyError(DomainError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Media is empty: {reason}")

    def attributes(self) -> Dict[str, Any]:
        return {"reason": self.reason}


class MediaNotFoundError(DomainError):
    """Raised when a media reference cannot be resolved by the parsing engine."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Media not found: {source}")

    def attributes(self) -> Dict[str, Any]:
        return {"source": self.source}


class MediaParsingError(DomainError):
    """Raised when the parsing engine fails on otherwise valid media."""

    def __init__(self, source: str, cause: Any):
        self.source = source
        self.cause = cause
        super().__init__(f"Failed to parse media from {source}: {cause}")

    def attributes(self) -> Dict[str, Any]:
        return {"source": self.source, "cause": str(self.cause)}
