"""Domain error → wire error translation table.

The table is explicit and total: every concrete ``DomainError`` defined in
this package has exactly one entry. An entry of ``None`` marks an error
that is only ever fatal (infrastructure failure) and has no wire form.
``check_exhaustive`` runs when the app is built, so a new domain error
without an entry stops the service from starting.
"""

from typing import Dict, Iterable, List, Optional, Type

from coursition.errors import DomainError, FatalError, WireError
from coursition.jobs.errors import (
    JobNotFound,
    JobNotFoundError,
    JobResultNotFound,
    JobResultNotFoundError,
    JobsStoreError,
)
from coursition.media.errors import (
    MediaEmpty,
    MediaEmptyError,
    MediaNotFound,
    MediaNotFoundError,
    MediaParsingError,
)

DOMAIN_TO_WIRE: Dict[Type[DomainError], Optional[Type[WireError]]] = {
    JobNotFoundError: JobNotFound,
    JobResultNotFoundError: JobResultNotFound,
    JobsStoreError: None,
    MediaEmptyError: MediaEmpty,
    MediaParsingError: MediaEmpty,
    MediaNotFoundError: MediaNotFound,
}


class UnmappedDomainError(Exception):
    """Raised when domain errors exist without a translation entry."""

    def __init__(self, missing: List[Type[DomainError]]):
        self.missing = missing
        names = ", ".join(sorted(cls.__name__ for cls in missing))
        super().__init__(f"Domain errors without a wire translation: {names}")


def _all_subclasses(cls: type) -> List[type]:
    found = []
    for sub in cls.__subclasses__():
        found.append(sub)
        found.extend(_all_subclasses(sub))
    return found


def domain_errors() -> List[Type[DomainError]]:
    """Every DomainError subclass defined by this package."""
    return [
        cls for cls in _all_subclasses(DomainError)
        if cls.__module__.startswith("coursition.")
    ]


def check_exhaustive(errors: Optional[Iterable[Type[DomainError]]] = None) -> None:
    candidates = domain_errors() if errors is None else list(errors)
    missing = [cls for cls in candidates if cls not in DOMAIN_TO_WIRE]
    if missing:
        raise UnmappedDomainError(missing)


def to_wire_error(error: DomainError) -> WireError:
    """Translate a domain error. Unmapped or fatal-only errors raise FatalError."""
    try:
        wire_cls = DOMAIN_TO_WIRE[type(error)]
    except KeyError:
        raise FatalError(
            f"No wire translation for {type(error).__name__}", cause=error
        ) from error
    if wire_cls is None:
        raise FatalError(f"{type(error).__name__} is not client-facing", cause=error) from error
    return wire_cls()


def status_for(error: DomainError) -> int:
    return to_wire_error(error).status_code
