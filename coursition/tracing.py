"""Span helpers on top of the OpenTelemetry API.

Without an SDK configured the spans are no-ops, so this module is safe to
use everywhere. Exporting spans is left to the process that hosts the app.
"""

from contextlib import contextmanager
from typing import Iterator, Optional, Union

from opentelemetry import trace
from opentelemetry.trace import Span, Status, StatusCode

Primitive = Union[str, bool, int, float]

_tracer = trace.get_tracer("coursition")


def _check_attributes(name: str, attributes: dict) -> dict:
    for key, value in attributes.items():
        # bool is an int subclass, so this covers all four primitive types
        if not isinstance(value, (str, int, float)):
            raise TypeError(
                f"span {name!r}: attribute {key!r} must be a primitive, "
                f"got {type(value).__name__}"
            )
    return attributes


@contextmanager
def span(name: str, **attributes: Optional[Primitive]) -> Iterator[Span]:
    """Open a span annotated with primitive-valued attributes.

    ``None`` values are dropped rather than recorded.
    """
    attrs = _check_attributes(
        name, {k: v for k, v in attributes.items() if v is not None}
    )
    with _tracer.start_as_current_span(
        name,
        attributes=attrs,
        record_exception=False,
        set_status_on_exception=False,
    ) as current:
        yield current


def record_error(current: Span, error: BaseException) -> None:
    current.record_exception(error)
    current.set_status(Status(StatusCode.ERROR, type(error).__name__))
