"""Test doubles that fail by default.

``make_test_service(JobsStore, get_by_id=fake)`` returns a full JobsStore
whose every abstract method raises ``FatalError`` unless an override is
given. Tests only stub what they expect to be called; anything else fails
loudly instead of returning a silent default.
"""

import inspect
from typing import Any, Callable, Dict, Type, TypeVar

from coursition.errors import FatalError

S = TypeVar("S")


def _unimplemented(service: str, name: str, is_async: bool) -> Callable[..., Any]:
    message = f'{service}: Unimplemented method "{name}"'

    if is_async:
        async def method(self, *args, **kwargs):
            raise FatalError(message)
    else:
        def method(self, *args, **kwargs):
            raise FatalError(message)

    method.__name__ = name
    return method


def make_test_service(interface: Type[S], **overrides: Callable[..., Any]) -> S:
    """Build an instance of ``interface`` with selected methods replaced.

    Overrides are plain callables (sync or async, matching the interface)
    taking the method's arguments without ``self``.
    """
    abstract = getattr(interface, "__abstractmethods__", frozenset())
    unknown = [name for name in overrides if not callable(getattr(interface, name, None))]
    if unknown:
        raise TypeError(
            f"{interface.__name__} has no method(s): {', '.join(sorted(unknown))}"
        )

    namespace: Dict[str, Any] = {}
    for name in abstract:
        original = getattr(interface, name)
        namespace[name] = _unimplemented(
            interface.__name__, name, inspect.iscoroutinefunction(original)
        )
    double_cls = type(f"Test{interface.__name__}", (interface,), namespace)
    double = double_cls()
    for name, fn in overrides.items():
        setattr(double, name, fn)
    return double
