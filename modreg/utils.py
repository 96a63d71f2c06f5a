"""Small predicates and helpers used by the registry."""

from typing import Any, Hashable, Iterable, Iterator, List, Mapping, Sequence, Tuple, Type, TypeVar

from typing_extensions import TypeGuard

H = TypeVar("H", bound=Hashable)

_STRINGS = (str, bytes, bytearray)


def is_array(x: Any) -> TypeGuard[Sequence[Any]]:
    """True for ordered sequences, excluding strings and byte strings."""
    return isinstance(x, Sequence) and not isinstance(x, _STRINGS)


def is_function(x: Any) -> bool:
    return callable(x)


def is_object(x: Any) -> TypeGuard[Mapping[Any, Any]]:
    return isinstance(x, Mapping)


def is_string(x: Any) -> TypeGuard[str]:
    return isinstance(x, str)


def each(x: Any) -> Iterator[Tuple[Any, Any]]:
    """Iterate the (key, value) pairs of a mapping or the (index, element)
    pairs of an array. Anything else (including None) yields nothing.
    """
    if is_object(x):
        yield from x.items()
    elif is_array(x):
        yield from enumerate(x)


def contains(x: Any, value: Any) -> bool:
    return x is not None and value in x


def uniq(items: Iterable[H]) -> List[H]:
    """Return a new list without duplicates, keeping first occurrences in order."""
    return list(dict.fromkeys(items))


def check(expression: Any, error: Type[Exception], *args: Any) -> None:
    """Raise error(*args) if expression is falsy."""
    if not expression:
        raise error(*args)
