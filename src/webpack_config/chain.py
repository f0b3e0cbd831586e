"""Helpers for working with loader chains and rule lists.

All helpers return new lists and never modify the sequence they are given.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

T = TypeVar("T")


def loader_name(entry: Any) -> Optional[str]:
    """Name of the loader a chain entry refers to, or None if it has none."""
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        return entry.get("loader")
    return None


def loader_options(entry: Any) -> Dict[str, Any]:
    """Options of a chain entry (empty for bare loader names)."""
    if isinstance(entry, dict):
        return dict(entry.get("options") or {})
    return {}


def with_options(entry: Any, options: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of ``entry`` with its options replaced; bare names become dicts."""
    if isinstance(entry, dict):
        updated = dict(entry)
    else:
        updated = {"loader": loader_name(entry)}
    updated["options"] = options
    return updated


def index_where(sequence: Sequence[T], predicate: Callable[[T], bool]) -> Optional[int]:
    """Index of the first element matching ``predicate``, or None."""
    for index, item in enumerate(sequence):
        if predicate(item):
            return index
    return None


def replace_where(sequence: Sequence[T],
                  predicate: Callable[[T], bool],
                  transform: Callable[[T], T]) -> List[T]:
    """
    Copy ``sequence`` with the first element matching ``predicate`` transformed.

    Args:
        sequence: Source sequence, left unchanged
        predicate: Selects the element to replace
        transform: Receives the matching element, returns its replacement

    Returns:
        New list; identical to ``sequence`` if nothing matched.
    """
    result = list(sequence)
    index = index_where(result, predicate)
    if index is not None:
        result[index] = transform(result[index])
    return result


def is_loader(name: str) -> Callable[[Any], bool]:
    """Predicate matching chain entries for the loader ``name``."""
    return lambda entry: loader_name(entry) == name


def rule_accepts(rule: Any, filename: str) -> bool:
    """Whether a rule's ``test`` condition matches ``filename``."""
    if not isinstance(rule, dict):
        return False
    return _condition_accepts(rule.get("test"), filename)


def _condition_accepts(test: Any, filename: str) -> bool:
    # Lists are webpack's "any of" conditions
    if isinstance(test, (list, tuple)):
        return any(_condition_accepts(item, filename) for item in test)
    if hasattr(test, "search"):
        return test.search(filename) is not None
    if callable(test):
        return bool(test(filename))
    return False
