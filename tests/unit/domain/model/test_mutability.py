"""Tests for domain/model/mutability.py."""

import pytest

from mutcheck.domain.exceptions import MutCheckError, UnknownMutabilityError
from mutcheck.domain.model.mutability import StateMutability, join_all

PURE = StateMutability.PURE
VIEW = StateMutability.VIEW
NONPAYABLE = StateMutability.NONPAYABLE
PAYABLE = StateMutability.PAYABLE

ALL_LEVELS = (PURE, VIEW, NONPAYABLE, PAYABLE)


class TestOrder:
    """Tests for the total order."""

    def test_order_values(self) -> None:
        assert [level.order for level in ALL_LEVELS] == [0, 1, 2, 3]

    def test_strictly_increasing(self) -> None:
        assert PURE < VIEW < NONPAYABLE < PAYABLE

    def test_comparisons_derived(self) -> None:
        assert PAYABLE > VIEW
        assert VIEW >= VIEW
        assert PURE <= NONPAYABLE

    def test_max_is_most_permissive(self) -> None:
        assert max(ALL_LEVELS) is PAYABLE
        assert min(ALL_LEVELS) is PURE

    def test_compare_with_other_type_raises(self) -> None:
        with pytest.raises(TypeError):
            _ = PURE < 1  # type: ignore[operator]

    def test_hashable(self) -> None:
        assert len(set(ALL_LEVELS)) == 4


class TestJoin:
    """Tests for the lattice join."""

    @pytest.mark.parametrize("a", ALL_LEVELS)
    @pytest.mark.parametrize("b", ALL_LEVELS)
    def test_join_is_max(self, a: StateMutability, b: StateMutability) -> None:
        assert a.join(b) is max(a, b)

    def test_join_commutative(self) -> None:
        assert VIEW.join(NONPAYABLE) is NONPAYABLE.join(VIEW)

    def test_pure_is_bottom(self) -> None:
        for level in ALL_LEVELS:
            assert PURE.join(level) is level

    def test_join_all_empty_is_pure(self) -> None:
        assert join_all([]) is PURE

    def test_join_all(self) -> None:
        assert join_all([VIEW, PURE, NONPAYABLE, VIEW]) is NONPAYABLE


class TestRender:
    """Tests for rendering and parsing names."""

    def test_render(self) -> None:
        assert [level.render() for level in ALL_LEVELS] == ["pure", "view", "nonpayable", "payable"]

    def test_str_is_render(self) -> None:
        assert str(VIEW) == "view"

    @pytest.mark.parametrize("level", ALL_LEVELS)
    def test_parse_rendered_name(self, level: StateMutability) -> None:
        assert StateMutability.parse(level.render()) is level

    def test_parse_unknown_raises(self) -> None:
        with pytest.raises(UnknownMutabilityError, match="constant"):
            StateMutability.parse("constant")

    def test_unknown_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            StateMutability.parse("")

    def test_unknown_is_library_error(self) -> None:
        with pytest.raises(MutCheckError):
            StateMutability.parse("Pure")


class TestForCaller:
    """Tests for call-compatibility normalization."""

    def test_payable_normalized_to_nonpayable(self) -> None:
        assert PAYABLE.for_caller() is NONPAYABLE

    @pytest.mark.parametrize("level", (PURE, VIEW, NONPAYABLE))
    def test_other_levels_unchanged(self, level: StateMutability) -> None:
        assert level.for_caller() is level
