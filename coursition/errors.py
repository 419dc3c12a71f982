"""Error families shared by every layer.

Two disjoint families flow through the pipeline:

- ``DomainError`` subclasses are raised by stores and use cases. They carry
  diagnostic payload and are never serialized.
- ``WireError`` subclasses are raised by handlers only. They carry nothing
  beyond their tag and HTTP status and are safe to send to a client.

``FatalError`` marks a defect or infrastructure failure. It is never
translated to a wire error.
"""

from typing import Any, ClassVar, Dict


class DomainError(Exception):
    """Base class for internal, diagnostic-bearing failures."""

    def attributes(self) -> Dict[str, Any]:
        """Payload fields, used for logging."""
        return {}

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.attributes().items())
        return f"{type(self).__name__}({fields})"


class WireError(Exception):
    """Base class for client-facing errors.

    Subclasses set ``status_code``; the tag is the class name.
    """

    status_code: ClassVar[int] = 500

    def __init__(self) -> None:
        super().__init__(self.tag())

    @classmethod
    def tag(cls) -> str:
        return cls.__name__

    def to_dict(self) -> Dict[str, str]:
        return {"_tag": self.tag()}

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))


class FatalError(Exception):
    """Unrecoverable failure: a programming or infrastructure defect."""

    def __init__(self, message: str, cause: Any = None):
        self.message = message
        self.cause = cause
        super().__init__(message)
