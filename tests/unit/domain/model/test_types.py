"""Tests for domain/model/types.py."""

import pytest

from mutcheck.domain.model.enums import DataLocation, MagicKind, TypeCategory
from mutcheck.domain.model.mutability import StateMutability
from mutcheck.domain.model.types import (
    AddressType,
    ArrayType,
    BoolType,
    ContractType,
    FixedBytesType,
    FunctionType,
    IntegerType,
    MagicType,
    MappingType,
    StructType,
)


class TestCategories:
    """Each type reports its category."""

    def test_value_type_categories(self) -> None:
        assert IntegerType().category is TypeCategory.INTEGER
        assert AddressType().category is TypeCategory.ADDRESS
        assert BoolType().category is TypeCategory.BOOL
        assert FixedBytesType().category is TypeCategory.FIXED_BYTES

    def test_reference_type_categories(self) -> None:
        assert StructType(location=DataLocation.STORAGE).category is TypeCategory.STRUCT
        assert ArrayType(location=DataLocation.MEMORY).category is TypeCategory.ARRAY
        assert MappingType().category is TypeCategory.MAPPING

    def test_other_categories(self) -> None:
        assert ContractType().category is TypeCategory.CONTRACT
        assert MagicType(kind=MagicKind.MESSAGE).category is TypeCategory.MAGIC
        assert FunctionType().category is TypeCategory.FUNCTION


class TestDataLocation:
    """Tests for data_stored_in()."""

    def test_value_types_live_nowhere(self) -> None:
        assert IntegerType().data_stored_in(DataLocation.STORAGE) is False
        assert BoolType().data_stored_in(DataLocation.MEMORY) is False

    def test_struct_location(self) -> None:
        struct = StructType(location=DataLocation.STORAGE)
        assert struct.data_stored_in(DataLocation.STORAGE) is True
        assert struct.data_stored_in(DataLocation.MEMORY) is False

    def test_array_location(self) -> None:
        array = ArrayType(location=DataLocation.CALLDATA)
        assert array.data_stored_in(DataLocation.CALLDATA) is True
        assert array.data_stored_in(DataLocation.STORAGE) is False

    def test_mapping_always_storage(self) -> None:
        assert MappingType().data_stored_in(DataLocation.STORAGE) is True
        assert MappingType().data_stored_in(DataLocation.MEMORY) is False


class TestArrayType:
    """Tests for ArrayType."""

    def test_dynamic_without_length(self) -> None:
        assert ArrayType(location=DataLocation.STORAGE).is_dynamically_sized is True

    def test_static_with_length(self) -> None:
        assert ArrayType(location=DataLocation.STORAGE, length=3).is_dynamically_sized is False

    def test_zero_length_raises(self) -> None:
        with pytest.raises(ValueError, match="length"):
            ArrayType(location=DataLocation.STORAGE, length=0)


class TestFailFirst:
    """FAIL-FIRST validation of type parameters."""

    @pytest.mark.parametrize("bits", [0, 7, 264])
    def test_invalid_integer_width(self, bits: int) -> None:
        with pytest.raises(ValueError, match="bits"):
            IntegerType(bits=bits)

    def test_invalid_fixed_bytes_size(self) -> None:
        with pytest.raises(ValueError, match="size"):
            FixedBytesType(size=33)


class TestFunctionType:
    """Tests for FunctionType."""

    def test_default_mutability_nonpayable(self) -> None:
        assert FunctionType().state_mutability is StateMutability.NONPAYABLE

    def test_equal_by_value(self) -> None:
        assert FunctionType(state_mutability=StateMutability.VIEW) == FunctionType(
            state_mutability=StateMutability.VIEW
        )

    def test_frozen(self) -> None:
        function_type = FunctionType()
        with pytest.raises(AttributeError):
            function_type.state_mutability = StateMutability.PURE  # type: ignore[misc]
