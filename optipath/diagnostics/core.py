"""Diagnostic checks for dioid laws.

The path algorithms assume their dioid is lawful and never verify it on the
default path. These helpers make the laws checkable on demand, either from
tests or automatically while debug mode is enabled.
"""

from __future__ import annotations

from itertools import product
from typing import Any, Iterable, List


def is_selective(dioid: Any, a: Any, b: Any) -> bool:
    """
    Check that ``combine(a, b)`` returns one of its operands.

    Parameters
    ----------
    dioid:
        Object exposing ``combine``.
    a, b:
        Labels to combine.

    Returns
    -------
    bool
        True if the result equals ``a`` or ``b``.
    """
    chosen = dioid.combine(a, b)
    return chosen == a or chosen == b


def assert_identities(dioid: Any) -> None:
    """
    Assert the laws that involve only ``zero`` and ``one``.

    Checks that ``zero`` is the identity of ``combine`` and annihilates
    ``extend``, that ``one`` is the identity of ``extend`` and that
    ``combine`` is selective and idempotent on the two identities.

    Raises
    ------
    ValueError
        If any of these laws fails.
    """
    zero, one = dioid.zero, dioid.one
    checks = [
        (dioid.combine(zero, one) == one, "combine(zero, one) must equal one"),
        (dioid.combine(one, zero) == one, "combine(one, zero) must equal one"),
        (dioid.combine(zero, zero) == zero, "combine(zero, zero) must equal zero"),
        (dioid.combine(one, one) == one, "combine(one, one) must equal one"),
        (dioid.extend(zero, one) == zero, "extend(zero, one) must equal zero"),
        (dioid.extend(one, zero) == zero, "extend(one, zero) must equal zero"),
        (dioid.extend(one, one) == one, "extend(one, one) must equal one"),
    ]
    failed = [message for ok, message in checks if not ok]
    if failed:
        raise ValueError(f"Dioid {dioid!r} violates identity laws: " + "; ".join(failed))


def check_dioid_laws(dioid: Any, samples: Iterable[Any]) -> List[str]:
    """
    Evaluate the dioid laws over every pair and triple of sample labels.

    ``zero`` and ``one`` are added to the samples. Cost is cubic in the
    number of samples, so keep the sample set small.

    Parameters
    ----------
    dioid:
        Object exposing ``zero``, ``one``, ``combine`` and ``extend``.
    samples:
        Representative labels.

    Returns
    -------
    list of str
        One message per violated law instance; empty if all laws hold.
    """
    zero, one = dioid.zero, dioid.one
    values = [zero, one]
    for sample in samples:
        if sample not in values:
            values.append(sample)

    violations: List[str] = []
    combine, extend = dioid.combine, dioid.extend

    for a in values:
        if combine(a, a) != a:
            violations.append(f"combine is not idempotent on {a!r}")
        if combine(zero, a) != a:
            violations.append(f"zero is not the combine identity for {a!r}")
        if extend(one, a) != a or extend(a, one) != a:
            violations.append(f"one is not the extend identity for {a!r}")
        if extend(zero, a) != zero or extend(a, zero) != zero:
            violations.append(f"zero does not annihilate {a!r} under extend")

    for a, b in product(values, repeat=2):
        if not is_selective(dioid, a, b):
            violations.append(f"combine({a!r}, {b!r}) is not one of its operands")
        if combine(a, b) != combine(b, a):
            violations.append(f"combine is not commutative on ({a!r}, {b!r})")

    for a, b, c in product(values, repeat=3):
        if combine(combine(a, b), c) != combine(a, combine(b, c)):
            violations.append(f"combine is not associative on ({a!r}, {b!r}, {c!r})")
        if extend(extend(a, b), c) != extend(a, extend(b, c)):
            violations.append(f"extend is not associative on ({a!r}, {b!r}, {c!r})")
        if extend(a, combine(b, c)) != combine(extend(a, b), extend(a, c)):
            violations.append(f"extend does not distribute over combine on ({a!r}, {b!r}, {c!r})")

    return violations


def assert_dioid_laws(dioid: Any, samples: Iterable[Any]) -> None:
    """
    Assert that ``dioid`` satisfies the dioid laws on the given samples.

    Raises
    ------
    ValueError
        If any law fails; the message lists the first few violations.
    """
    violations = check_dioid_laws(dioid, samples)
    if violations:
        shown = "; ".join(violations[:5])
        more = f" (and {len(violations) - 5} more)" if len(violations) > 5 else ""
        raise ValueError(f"Dioid {dioid!r} violates its laws: {shown}{more}")
