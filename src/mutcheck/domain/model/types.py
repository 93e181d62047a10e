"""Resolved expression types, as annotated by the type resolver.

Only the facets the mutability analysis looks at are modelled:
category, data location of reference types, and a few per-kind flags.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from mutcheck.domain.model.enums import DataLocation, MagicKind, TypeCategory
from mutcheck.domain.model.mutability import StateMutability

if TYPE_CHECKING:
    from mutcheck.domain.model.nodes import ContractDefinition, StructDefinition


@dataclass(frozen=True, slots=True)
class Type:
    """Base of all resolved types."""

    category: ClassVar[TypeCategory]

    def data_stored_in(self, location: DataLocation) -> bool:
        """Check whether values of this type live in the given location.

        Value types live nowhere in particular.
        """
        return False


@dataclass(frozen=True, slots=True)
class ReferenceType(Type):
    """Type whose values live in a data location.

    Attributes:
        location: STORAGE, MEMORY or CALLDATA
    """

    location: DataLocation

    def data_stored_in(self, location: DataLocation) -> bool:
        return self.location is location


@dataclass(frozen=True, slots=True)
class IntegerType(Type):
    """uintN / intN.

    Attributes:
        bits: Width, multiple of 8 in 8..256
        signed: intN when True
    """

    category: ClassVar[TypeCategory] = TypeCategory.INTEGER
    bits: int = 256
    signed: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.bits % 8 != 0 or not 8 <= self.bits <= 256:
            raise ValueError(f"bits must be a multiple of 8 in 8..256, got {self.bits}")


@dataclass(frozen=True, slots=True)
class AddressType(Type):
    category: ClassVar[TypeCategory] = TypeCategory.ADDRESS
    payable: bool = False


@dataclass(frozen=True, slots=True)
class BoolType(Type):
    category: ClassVar[TypeCategory] = TypeCategory.BOOL


@dataclass(frozen=True, slots=True)
class RationalNumberType(Type):
    """Type of a number literal before conversion."""

    category: ClassVar[TypeCategory] = TypeCategory.RATIONAL


@dataclass(frozen=True, slots=True)
class FixedBytesType(Type):
    category: ClassVar[TypeCategory] = TypeCategory.FIXED_BYTES
    size: int = 32

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not 1 <= self.size <= 32:
            raise ValueError(f"size must be in 1..32, got {self.size}")


@dataclass(frozen=True, slots=True)
class StringLiteralType(Type):
    category: ClassVar[TypeCategory] = TypeCategory.STRING_LITERAL


@dataclass(frozen=True, slots=True)
class ContractType(Type):
    """Type of a contract reference (`this`, `super`, variables of contract type).

    Attributes:
        contract: Referenced contract definition
        is_super: True only for the `super` reference
    """

    category: ClassVar[TypeCategory] = TypeCategory.CONTRACT
    contract: ContractDefinition | None = None
    is_super: bool = False


@dataclass(frozen=True, slots=True)
class MagicType(Type):
    """Type of block, msg, tx and abi."""

    category: ClassVar[TypeCategory] = TypeCategory.MAGIC
    kind: MagicKind = MagicKind.BLOCK


@dataclass(frozen=True, slots=True)
class StructType(ReferenceType):
    category: ClassVar[TypeCategory] = TypeCategory.STRUCT
    struct: StructDefinition | None = None


@dataclass(frozen=True, slots=True)
class ArrayType(ReferenceType):
    """T[] / T[n] / bytes / string.

    Attributes:
        base_type: Element type
        length: Static length, None for dynamically sized arrays
    """

    category: ClassVar[TypeCategory] = TypeCategory.ARRAY
    base_type: Type | None = None
    length: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.length is not None and self.length < 1:
            raise ValueError(f"static array length must be >= 1, got {self.length}")

    @property
    def is_dynamically_sized(self) -> bool:
        return self.length is None


@dataclass(frozen=True, slots=True)
class MappingType(Type):
    """mapping(K => V). Mappings only exist in storage."""

    category: ClassVar[TypeCategory] = TypeCategory.MAPPING
    key_type: Type | None = None
    value_type: Type | None = None

    def data_stored_in(self, location: DataLocation) -> bool:
        return location is DataLocation.STORAGE


@dataclass(frozen=True, slots=True)
class FunctionType(Type):
    """Type of a callable expression.

    Attributes:
        state_mutability: Declared mutability of the callee
        external: True for message calls (this.f, other.f)
    """

    category: ClassVar[TypeCategory] = TypeCategory.FUNCTION
    state_mutability: StateMutability = StateMutability.NONPAYABLE
    external: bool = False


@dataclass(frozen=True, slots=True)
class EnumType(Type):
    category: ClassVar[TypeCategory] = TypeCategory.ENUM
    name: str = ""


@dataclass(frozen=True, slots=True)
class TupleType(Type):
    category: ClassVar[TypeCategory] = TypeCategory.TUPLE
    components: tuple[Type | None, ...] = ()


@dataclass(frozen=True, slots=True)
class TypeType(Type):
    """Type of a type name used as an expression (e.g. `uint8` in `uint8(x)`)."""

    category: ClassVar[TypeCategory] = TypeCategory.TYPE
    actual_type: Type | None = None


@dataclass(frozen=True, slots=True)
class ModifierType(Type):
    category: ClassVar[TypeCategory] = TypeCategory.MODIFIER
