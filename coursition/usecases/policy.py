"""Post-processing chain shared by every use case.

Each use case wraps its store calls in ``run_usecase``:

1. open a span annotated with primitive attributes,
2. await the work,
3. on a domain error, log it and mark the span,
4. apply the failure policy.

Failure policy is fixed per use case. Error types listed in ``propagate``
are client-actionable and re-raised unchanged. Any other domain error
becomes a ``FatalError``; a use case with an empty ``propagate`` tuple
cannot fail with a recoverable error.
"""

import logging
from typing import Awaitable, Callable, Optional, Tuple, Type, TypeVar

from coursition.errors import DomainError, FatalError
from coursition.tracing import Primitive, record_error, span

logger = logging.getLogger("coursition.usecases")

T = TypeVar("T")

PROPAGATE_NONE: Tuple[Type[DomainError], ...] = ()


async def run_usecase(
    name: str,
    work: Callable[[], Awaitable[T]],
    propagate: Tuple[Type[DomainError], ...] = PROPAGATE_NONE,
    **attributes: Optional[Primitive],
) -> T:
    with span(name, **attributes) as current:
        try:
            return await work()
        except DomainError as e:
            logger.error("%s failed: %r", name, e)
            record_error(current, e)
            if isinstance(e, propagate):
                raise
            raise FatalError(f"{name}: unexpected {type(e).__name__}", cause=e) from e
