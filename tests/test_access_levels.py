"""Unit tests for AccessLevel."""

import pytest

from chatroster.exceptions import IdentityParseError
from chatroster.models import AccessLevel

HIGHEST_FIRST = [
    AccessLevel.OWNER,
    AccessLevel.ADMIN,
    AccessLevel.OPER,
    AccessLevel.HALF_OP,
    AccessLevel.VOICE,
    AccessLevel.MEMBER,
]


class TestRanking:
    """Test the total order of access levels."""

    @pytest.mark.unit
    def test_strict_order(self):
        """Each level outranks every level after it."""
        for i, higher in enumerate(HIGHEST_FIRST):
            for lower in HIGHEST_FIRST[i + 1:]:
                assert higher > lower
                assert lower < higher
                assert higher >= lower
                assert not higher <= lower
                assert higher != lower

    @pytest.mark.unit
    def test_reflexive(self):
        """Every level equals itself and is not less than itself."""
        for level in HIGHEST_FIRST:
            assert level == level
            assert level <= level
            assert level >= level
            assert not level < level

    @pytest.mark.unit
    def test_sorting(self):
        """sorted() gives lowest first regardless of declaration or value order."""
        assert sorted(AccessLevel) == list(reversed(HIGHEST_FIRST))
        assert max(AccessLevel) == AccessLevel.OWNER

    @pytest.mark.unit
    def test_not_string_order(self):
        """Comparison ignores the string values ('admin' < 'voice' alphabetically)."""
        assert AccessLevel.ADMIN > AccessLevel.VOICE

    @pytest.mark.unit
    @pytest.mark.parametrize("other", ["member", "admin", "", 3])
    def test_plain_values_are_not_ranked(self, other):
        """Ordering against anything but a level raises TypeError."""
        with pytest.raises(TypeError):
            AccessLevel.OWNER < other
        with pytest.raises(TypeError):
            AccessLevel.MEMBER >= other
        with pytest.raises(TypeError):
            other > AccessLevel.OWNER

    @pytest.mark.unit
    def test_equality_with_value_string(self):
        """Equality still matches the persisted string value."""
        assert AccessLevel.OWNER == "owner"
        assert AccessLevel.OWNER != "member"

    @pytest.mark.unit
    def test_highest(self):
        """highest() picks the top rank and defaults to Member."""
        assert AccessLevel.highest([AccessLevel.VOICE, AccessLevel.OPER]) == AccessLevel.OPER
        assert AccessLevel.highest([]) == AccessLevel.MEMBER


class TestSymbols:
    """Test the prefix symbols."""

    @pytest.mark.unit
    def test_symbols(self):
        """Each level has its user list prefix."""
        assert [level.symbol for level in HIGHEST_FIRST] == ["~", "&", "@", "%", "+", ""]
        assert str(AccessLevel.OPER) == "@"

    @pytest.mark.unit
    def test_from_symbol(self):
        """Symbols map back to their level."""
        for level in HIGHEST_FIRST:
            assert AccessLevel.from_symbol(level.symbol) is level

    @pytest.mark.unit
    def test_unknown_symbol(self):
        """Unknown prefixes are rejected."""
        with pytest.raises(IdentityParseError):
            AccessLevel.from_symbol("!")
