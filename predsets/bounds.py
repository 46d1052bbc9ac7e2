"""
predsets/bounds.py
══════════════════

The scan bound shared by every exhaustive operation.

``for_all``, ``exists`` and ``map_set`` cannot inspect all of ℤ, so they
scan the finite domain

        [1, limit]        (inclusive, ascending)

A ``Bound`` is an immutable value.  Bounded operations receive it as an
explicit argument (or fall back to ``DEFAULT_BOUND``) and read it exactly
once, so a running scan can never observe a different limit part way
through.

Configuration precedence::

    explicit bound= argument  >  PREDSETS_BOUND env var  >  DEFAULT_BOUND
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final, Mapping, Optional, Union

from predsets.errors import BoundError

_log = logging.getLogger(__name__)

ENV_VAR: Final = "PREDSETS_BOUND"
DEFAULT_LIMIT: Final = 1000


@dataclass(frozen=True, slots=True)
class Bound:
    """
    Inclusive upper limit of the scanned domain ``[1, limit]``.

    Parameters
    ----------
    limit : int
        Largest integer inspected by bounded operations.  Must be >= 1.
    """
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        # bool is an int subclass; True as a bound is always a mistake
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise BoundError(
                f"bound must be an integer, got {type(self.limit).__name__}",
                value=self.limit,
            )
        if self.limit < 1:
            raise BoundError(
                f"bound must be at least 1, got {self.limit}",
                value=self.limit,
                hint="the scanned domain is [1, bound]",
            )

    # ---- Constructors ----------------------------------------------------

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Bound:
        """Build a bound from ``PREDSETS_BOUND``, or the default if unset."""
        env = os.environ if environ is None else environ
        raw = env.get(ENV_VAR)
        if raw is None or not raw.strip():
            return DEFAULT_BOUND
        try:
            limit = int(raw.strip())
        except ValueError:
            raise BoundError(
                f"{ENV_VAR}={raw!r} is not an integer", value=raw
            ) from None
        _log.debug("Using bound %d from %s", limit, ENV_VAR)
        return cls(limit)

    # ---- Queries ---------------------------------------------------------

    def domain(self) -> range:
        """The scanned integers, ascending."""
        return range(1, self.limit + 1)

    def contains(self, i: int) -> bool:
        """Is *i* inside the scanned domain?"""
        return 1 <= i <= self.limit

    def __repr__(self) -> str:
        return f"Bound([1, {self.limit}])"


DEFAULT_BOUND: Final = Bound(DEFAULT_LIMIT)


def resolve_bound(bound: Union[Bound, int, None]) -> Bound:
    """Normalise an optional ``bound=`` argument to a ``Bound``."""
    if bound is None:
        return DEFAULT_BOUND
    if isinstance(bound, Bound):
        return bound
    return Bound(bound)
