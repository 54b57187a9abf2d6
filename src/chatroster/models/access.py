"""Channel access levels.

The six ranks form a closed, fixed ranking. Comparisons go through the
explicit `_RANKS` table, never through declaration order or the string
values, so reordering the members does not change the ranking.
"""

from enum import Enum
from typing import Iterable

from chatroster.exceptions import IdentityParseError


class AccessLevel(str, Enum):
    """Permission level of a participant in a channel."""

    OWNER = "owner"
    ADMIN = "admin"
    OPER = "oper"
    HALF_OP = "halfop"
    VOICE = "voice"
    MEMBER = "member"

    @property
    def rank(self) -> int:
        """Position in the ranking; higher outranks lower."""
        return _RANKS[self]

    @property
    def symbol(self) -> str:
        """Prefix shown before the nickname in user lists."""
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "AccessLevel":
        """Look up a level by its prefix character ('' is Member)."""
        for level, level_symbol in _SYMBOLS.items():
            if level_symbol == symbol:
                return level
        raise IdentityParseError(symbol, "unknown access prefix")

    @classmethod
    def highest(cls, levels: Iterable["AccessLevel"]) -> "AccessLevel":
        """Return the highest rank among `levels`, or Member if there are none."""
        return max(levels, default=cls.MEMBER, key=lambda level: level.rank)

    def __str__(self) -> str:
        return self.symbol

    def _rank_against(self, other: object, op: str) -> tuple[int, int]:
        # only levels are ranked; never fall back to str ordering
        if not isinstance(other, AccessLevel):
            raise TypeError(
                f"'{op}' not supported between AccessLevel and {type(other).__name__}"
            )
        return _RANKS[self], _RANKS[other]

    def __lt__(self, other: object) -> bool:
        mine, theirs = self._rank_against(other, "<")
        return mine < theirs

    def __le__(self, other: object) -> bool:
        mine, theirs = self._rank_against(other, "<=")
        return mine <= theirs

    def __gt__(self, other: object) -> bool:
        mine, theirs = self._rank_against(other, ">")
        return mine > theirs

    def __ge__(self, other: object) -> bool:
        mine, theirs = self._rank_against(other, ">=")
        return mine >= theirs


_RANKS: dict[AccessLevel, int] = {
    AccessLevel.OWNER: 5,
    AccessLevel.ADMIN: 4,
    AccessLevel.OPER: 3,
    AccessLevel.HALF_OP: 2,
    AccessLevel.VOICE: 1,
    AccessLevel.MEMBER: 0,
}

_SYMBOLS: dict[AccessLevel, str] = {
    AccessLevel.OWNER: "~",
    AccessLevel.ADMIN: "&",
    AccessLevel.OPER: "@",
    AccessLevel.HALF_OP: "%",
    AccessLevel.VOICE: "+",
    AccessLevel.MEMBER: "",
}

# Prefix characters that may lead a raw identity string
ACCESS_PREFIXES = frozenset(symbol for symbol in _SYMBOLS.values() if symbol)
