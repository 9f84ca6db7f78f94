"""
Tessel Payload - Argument Tuple Collapsing and Clause Matching
==============================================================

Nodes pass positional argument tuples around. Comparisons (``case``, ``eq``,
``not_eq``) and windowing operators need a single value instead, so a tuple
is collapsed with one rule:

- exactly one element: the bare element
- any other arity: the whole ordered tuple

The rule is carried by an explicit payload type, ``Single`` or ``Many``.
"""

import re
from dataclasses import dataclass
from typing import Any, Tuple, Union


@dataclass(frozen=True)
class Single:
    """A one-argument payload."""

    value: Any

    def collapse(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Many:
    """A payload of zero or several arguments, kept as an ordered tuple."""

    values: Tuple[Any, ...]

    def collapse(self) -> Tuple[Any, ...]:
        return self.values


Payload = Union[Single, Many]


def payload_of(args: Tuple[Any, ...]) -> Payload:
    """Tag an argument tuple as Single or Many."""
    if len(args) == 1:
        return Single(args[0])
    return Many(tuple(args))


def singularize(args: Tuple[Any, ...]) -> Any:
    """
    Collapse an argument tuple to the value used for comparisons.

    Example:
        ```python
        singularize((5,))        # 5
        singularize((1, 2))      # (1, 2)
        singularize(())          # ()
        ```
    """
    return payload_of(args).collapse()


def matches(clause: Any, value: Any) -> bool:
    """
    Pattern-match ``value`` against ``clause``.

    - a class matches instances of it
    - a compiled regex matches strings it finds a match in
    - a range, set or frozenset matches its members
    - any other callable matches when it returns a truthy result
    - everything else matches by equality
    """
    if isinstance(clause, type):
        return isinstance(value, clause)
    if isinstance(clause, re.Pattern):
        return isinstance(value, str) and clause.search(value) is not None
    if isinstance(clause, (range, set, frozenset)):
        try:
            return value in clause
        except TypeError:
            # unhashable values are never members of a set
            return False
    if callable(clause):
        return bool(clause(value))
    return clause == value
