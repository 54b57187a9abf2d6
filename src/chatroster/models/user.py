"""Chat participant identity.

A `User` is a nickname with an optional username and hostname, plus the
access levels the participant holds in a channel. Two different contracts
apply to it:

- Equality and hashing use (nickname, username, hostname) only. A user
  who gains or loses operator status is still the same participant, so
  sets and dicts keyed by User do not distinguish rank changes.
- Ordering puts the highest access level first, then sorts nicknames
  case-insensitively. This is the order of a rendered user list.

Canonical strings follow `nick[!user][@host]`; the display form used in
the UI is `nick (user@host)`.
"""

from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from chatroster.exceptions import IdentityParseError

from .access import ACCESS_PREFIXES, AccessLevel
from .enums import ColorMode


class Nick:
    """Case-preserving nickname.

    `==` and `hash` are case-sensitive; `<`, `<=`, `>` and `>=` compare
    lowercased copies without touching the stored casing.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str):
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Nick({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nick):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other: "Nick") -> bool:
        if not isinstance(other, Nick):
            return NotImplemented
        return self._value.lower() < other._value.lower()

    def __le__(self, other: "Nick") -> bool:
        if not isinstance(other, Nick):
            return NotImplemented
        return self._value.lower() <= other._value.lower()

    def __gt__(self, other: "Nick") -> bool:
        if not isinstance(other, Nick):
            return NotImplemented
        return self._value.lower() > other._value.lower()

    def __ge__(self, other: "Nick") -> bool:
        if not isinstance(other, Nick):
            return NotImplemented
        return self._value.lower() >= other._value.lower()


def parse_identity(value: str) -> dict[str, Any]:
    """Split a raw identity string into User fields.

    Leading access prefixes (`~&@%+`, possibly several) become access
    levels. The remainder is read as `nick[!user][@host]`; empty user or
    host segments are dropped.

    Raises:
        IdentityParseError: If no nickname is left after the prefixes
    """
    raw = value.strip()

    access_levels = set()
    rest = raw
    while rest and rest[0] in ACCESS_PREFIXES:
        access_levels.add(AccessLevel.from_symbol(rest[0]))
        rest = rest[1:]

    username = None
    hostname = None
    if "!" in rest:
        nick, _, userhost = rest.partition("!")
        if "@" in userhost:
            username, _, hostname = userhost.partition("@")
        else:
            username = userhost
    else:
        nick, _, hostname = rest.partition("@")

    if not nick:
        raise IdentityParseError(value, "missing nickname")

    return {
        "nick": nick,
        "username": username or None,
        "hostname": hostname or None,
        "access_levels": frozenset(access_levels),
    }


def _join_identity(nick: str, user: Optional[str], host: Optional[str], sep: str) -> str:
    if user is None and host is None:
        return nick
    if user is None:
        return f"{nick}{sep}{host}"
    if host is None:
        return f"{nick}{sep}{user}"
    return f"{nick}{sep}{user}@{host}"


class User(BaseModel):
    """Identity of a chat participant.

    Validates from either field values or a raw identity string, and
    serializes to the canonical `nick!user@host` string (access levels
    are not part of the canonical form).
    """

    model_config = ConfigDict(frozen=True)

    nick: str = Field(min_length=1, description="Nickname, case preserved")
    username: Optional[str] = Field(default=None, description="Username (ident)")
    hostname: Optional[str] = Field(default=None, description="Hostname or cloak")
    access_levels: frozenset[AccessLevel] = Field(
        default_factory=frozenset,
        description="Access levels held in the current channel",
    )

    @model_validator(mode="before")
    @classmethod
    def parse_raw_identity(cls, data: Any) -> Any:
        if isinstance(data, str):
            return parse_identity(data)
        return data

    @model_serializer
    def serialize_canonical(self) -> str:
        return self.canonical()

    @classmethod
    def parse(cls, value: str) -> "User":
        """Parse a raw identity string such as `@nick!user@host`.

        Raises:
            IdentityParseError: If the string has no nickname
        """
        return cls(**parse_identity(value))

    @classmethod
    def new(
        cls,
        nick: "Nick | str",
        username: Optional[str] = None,
        hostname: Optional[str] = None,
        access_levels: Iterable[AccessLevel] = (),
    ) -> "User":
        """Construct a user from its parts."""
        return cls(
            nick=str(nick),
            username=username,
            hostname=hostname,
            access_levels=frozenset(access_levels),
        )

    @property
    def nickname(self) -> Nick:
        return Nick(self.nick)

    def highest_access_level(self) -> AccessLevel:
        """Highest access level held, Member if none."""
        return AccessLevel.highest(self.access_levels)

    def with_access_levels(self, levels: Iterable[AccessLevel]) -> "User":
        """Return a copy holding exactly `levels`."""
        return self.model_copy(update={"access_levels": frozenset(levels)})

    def with_access_level(self, level: AccessLevel, present: bool = True) -> "User":
        """Return a copy with `level` granted (present=True) or revoked."""
        if present:
            return self.with_access_levels(self.access_levels | {level})
        return self.with_access_levels(self.access_levels - {level})

    def canonical(self) -> str:
        """Canonical identity string: `nick`, `nick@host`, `nick!user` or `nick!user@host`."""
        if self.username is None:
            return _join_identity(self.nick, None, self.hostname, "@")
        return _join_identity(self.nick, self.username, self.hostname, "!")

    def formatted(self) -> str:
        """Display string: `nick`, `nick (host)`, `nick (user)` or `nick (user@host)`."""
        if self.username is None and self.hostname is None:
            return self.nick
        return f"{_join_identity(self.nick, self.username, self.hostname, ' (')})"

    def color_seed(self, mode: ColorMode) -> Optional[str]:
        """Seed string for a per-participant color.

        Returns the hostname (falling back to the nickname) under
        `ColorMode.UNIQUE`, and None under `ColorMode.SOLID`.
        """
        if ColorMode(mode) == ColorMode.SOLID:
            return None
        return self.hostname if self.hostname is not None else self.nick

    def sort_key(self) -> tuple:
        """Key of the roster order.

        Access level descending, then nickname ignoring case. The remaining
        entries only break ties between otherwise order-equal users so that
        distinct identities never compare as equal.
        """
        return (
            -self.highest_access_level().rank,
            self.nick.lower(),
            self.nick,
            (self.username is not None, self.username or ""),
            (self.hostname is not None, self.hostname or ""),
        )

    def _identity(self) -> tuple[str, Optional[str], Optional[str]]:
        return (self.nick, self.username, self.hostname)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __lt__(self, other: "User") -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: "User") -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: "User") -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: "User") -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def __str__(self) -> str:
        return self.nick
