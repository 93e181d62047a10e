"""Domain enumerations."""

from enum import Enum, auto


class Severity(Enum):
    """Diagnostic severity."""

    ERROR = auto()  # check fails
    WARNING = auto()  # check passes, warning shown
    INFO = auto()  # informational


class DiagnosticKind(Enum):
    """What a diagnostic reports."""

    READS_ENVIRONMENT = auto()  # pure function reads state or environment
    MODIFIES_STATE = auto()  # pure/view function writes state
    CAN_BE_RESTRICTED = auto()  # tighter level is possible


class DataLocation(Enum):
    """Where a reference-typed value lives."""

    STORAGE = auto()
    MEMORY = auto()
    CALLDATA = auto()


class TypeCategory(Enum):
    """Discriminator of resolved expression types."""

    ADDRESS = auto()
    INTEGER = auto()
    RATIONAL = auto()
    BOOL = auto()
    FIXED_BYTES = auto()
    STRING_LITERAL = auto()
    CONTRACT = auto()
    MAGIC = auto()
    STRUCT = auto()
    ARRAY = auto()
    MAPPING = auto()
    FUNCTION = auto()
    ENUM = auto()
    TUPLE = auto()
    TYPE = auto()
    MODIFIER = auto()


class MagicKind(Enum):
    """Language-provided environment objects."""

    BLOCK = auto()
    MESSAGE = auto()
    TRANSACTION = auto()
    ABI = auto()


class FunctionCallKind(Enum):
    """What a call expression actually does."""

    FUNCTION_CALL = auto()
    TYPE_CONVERSION = auto()  # uint8(x), address(c)
    STRUCT_CONSTRUCTOR_CALL = auto()  # S({a: 1})
