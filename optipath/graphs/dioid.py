"""
Dioid algebra for optimum-path problems.

A dioid here is a selective idempotent semiring over edge labels:

- ``combine(a, b)`` chooses the better of two labels and always returns one
  of its operands unchanged (selectivity). It is commutative, associative
  and idempotent, with ``zero`` as identity.
- ``extend(a, b)`` composes a label along an edge. It is associative, has
  ``one`` as identity and ``zero`` as annihilator.

The laws are preconditions of every algorithm in :mod:`optipath.graphs`; they
are not checked at runtime unless debug mode is enabled (see
:mod:`optipath.diagnostics`). Violating them yields unspecified results.

The direction in which labels improve is not declared by the dioid. It is
derived from how ``one`` and ``zero`` relate under ``combine`` and under the
natural order of the label type (see :func:`traversal_direction`).

References:
    - Gondran, Minoux. "Graphs, Dioids and Semirings", Springer (2008).
    - Mohri. "Semiring Frameworks and Algorithms for Shortest-Distance
      Problems", J. Autom. Lang. Comb. 7 (2002).
"""

import math
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class Dioid(Protocol):
    """
    Structural interface every edge-label algebra must satisfy.

    Any object exposing these four members can parameterize the path
    algorithms; no inheritance is required.

    Attributes:
        zero: Identity of ``combine``, annihilator of ``extend``
            ("no known connection").
        one: Identity of ``extend`` ("already there, nothing incurred").
    """

    zero: Any
    one: Any

    def combine(self, a: Any, b: Any) -> Any:
        """Choose the better of ``a`` and ``b`` (must return one of them)."""
        ...

    def extend(self, a: Any, b: Any) -> Any:
        """Compose ``a`` followed by ``b`` along a path."""
        ...


@dataclass(frozen=True)
class SelectiveDioid:
    """
    Dioid assembled from plain values and binary functions.

    Attributes:
        name: Human-readable name, used in log and error messages.
        combine: Selective choice between two labels.
        extend: Sequential composition of two labels.
        zero: Identity of ``combine``.
        one: Identity of ``extend``.

    Example:
        >>> hops = SelectiveDioid("hops", min, operator.add, math.inf, 0)
        >>> hops.combine(3, 5)
        3
    """

    name: str
    combine: Callable[[Any, Any], Any]
    extend: Callable[[Any, Any], Any]
    zero: Any
    one: Any

    def __repr__(self) -> str:
        return f"SelectiveDioid({self.name!r}, zero={self.zero!r}, one={self.one!r})"


# Shortest path: (min, +, inf, 0)
DISTANCE = SelectiveDioid("distance", min, operator.add, math.inf, 0)

# Widest path: (max, min, 0, inf)
CAPACITY = SelectiveDioid("capacity", max, min, 0, math.inf)

# Most reliable path, labels are probabilities in [0, 1]: (max, *, 0, 1)
RELIABILITY = SelectiveDioid("reliability", max, operator.mul, 0.0, 1.0)

# Minimax path, the smallest worst edge: (min, max, inf, -inf)
BOTTLENECK = SelectiveDioid("bottleneck", min, max, math.inf, -math.inf)

# Plain reachability: (or, and, False, True)
REACHABILITY = SelectiveDioid("reachability", operator.or_, operator.and_, False, True)


class Direction(Enum):
    """Order in which a priority traversal extracts labels."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


def traversal_direction(dioid: Dioid) -> Direction:
    """
    Derive whether better labels are smaller or larger.

    The label ``combine`` selects between ``one`` and ``zero`` marks the
    preferred end of the natural order:

    - ``combine(one, zero) == one``: ascending when ``one < zero``,
      descending otherwise;
    - ``combine(one, zero) == zero``: descending when ``one < zero``,
      ascending otherwise;
    - anything else falls back to ascending.

    Args:
        dioid: Edge-label algebra.

    Returns:
        The traversal direction to use for a whole run.

    Example:
        >>> traversal_direction(DISTANCE)
        <Direction.ASCENDING: 'ascending'>
        >>> traversal_direction(CAPACITY)
        <Direction.DESCENDING: 'descending'>
    """
    one, zero = dioid.one, dioid.zero
    chosen = dioid.combine(one, zero)
    if chosen == one:
        return Direction.ASCENDING if one < zero else Direction.DESCENDING
    if chosen == zero:
        return Direction.DESCENDING if one < zero else Direction.ASCENDING
    return Direction.ASCENDING


def is_better(direction: Direction, a: Any, b: Any) -> bool:
    """Return True if label ``a`` is strictly preferable to ``b``."""
    if direction is Direction.ASCENDING:
        return a < b
    return a > b
