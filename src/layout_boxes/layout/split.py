"""Result pairs of the split operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from ..core.box import Box, S


@dataclass(frozen=True)
class BoxHorizontalSplit(Generic[S]):
    """A box cut by a horizontal line: ``upper`` is nearer the origin."""

    upper: Box[S]
    lower: Box[S]

    @classmethod
    def of(cls, upper: Box[S], lower: Box[S]) -> BoxHorizontalSplit[S]:
        return cls(upper=upper, lower=lower)


@dataclass(frozen=True)
class BoxVerticalSplit(Generic[S]):
    """A box cut by a vertical line: ``left`` is nearer the origin."""

    left: Box[S]
    right: Box[S]

    @classmethod
    def of(cls, left: Box[S], right: Box[S]) -> BoxVerticalSplit[S]:
        return cls(left=left, right=right)
