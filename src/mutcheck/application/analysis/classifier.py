"""Expression classifier: minimum level an AST node requires.

Pure function of (node, inferred modifier levels). Each rule looks only at
the node itself; sub-expressions are classified separately by the walker.
"""

from __future__ import annotations

from collections.abc import Mapping

from mutcheck.domain.exceptions import InvariantViolationError
from mutcheck.domain.model.enums import DataLocation, FunctionCallKind, TypeCategory
from mutcheck.domain.model.mutability import StateMutability
from mutcheck.domain.model.nodes import (
    FunctionCall,
    Identifier,
    IndexAccess,
    InlineAssembly,
    MagicVariableDeclaration,
    MemberAccess,
    ModifierDefinition,
    ModifierInvocation,
    Node,
    VariableDeclaration,
)
from mutcheck.domain.model.types import ArrayType, ContractType, FunctionType, IntegerType, Type

# msg.data, msg.sig and msg.value are fixed for the whole call: reading them
# does not observe the environment
_PURE_MAGIC_MEMBERS = frozenset({"data", "sig", "value"})

_BALANCE_CATEGORIES = frozenset({TypeCategory.CONTRACT, TypeCategory.INTEGER, TypeCategory.ADDRESS})


def classify(
    node: Node,
    inferred_modifiers: Mapping[ModifierDefinition, StateMutability],
) -> StateMutability:
    """Classify a single node.

    Args:
        node: Any AST node
        inferred_modifiers: Levels inferred for modifier definitions so far

    Returns:
        Minimum level the enclosing function must be declared at

    Raises:
        InvariantViolationError: If upstream annotations are missing
    """
    match node:
        case Identifier():
            return _classify_identifier(node)
        case MemberAccess():
            return _classify_member_access(node)
        case IndexAccess():
            return _classify_index_access(node)
        case FunctionCall():
            return _classify_function_call(node)
        case ModifierInvocation():
            return _classify_modifier_invocation(node, inferred_modifiers)
        case InlineAssembly():
            # TODO: inspect opcodes instead of assuming the worst
            return StateMutability.NONPAYABLE
    return StateMutability.PURE


def _read_or_write(writes: bool) -> StateMutability:
    return StateMutability.NONPAYABLE if writes else StateMutability.VIEW


def _classify_identifier(identifier: Identifier) -> StateMutability:
    declaration = identifier.referenced_declaration
    if declaration is None:
        raise InvariantViolationError(
            f"identifier {identifier.name!r} has no resolved declaration", identifier
        )

    match declaration:
        case VariableDeclaration(is_state_variable=True):
            return _read_or_write(identifier.lvalue_requested)

        case MagicVariableDeclaration(type=ContractType(is_super=is_super)):
            if identifier.name not in ("this", "super"):
                raise InvariantViolationError(
                    f"contract-typed magic must be this or super, got {identifier.name!r}",
                    identifier,
                )
            # `this` reads the contract address, `super` is compile-time only
            return StateMutability.PURE if is_super else StateMutability.VIEW

        case MagicVariableDeclaration(type=IntegerType()):
            if identifier.name != "now":
                raise InvariantViolationError(
                    f"integer-typed magic must be now, got {identifier.name!r}", identifier
                )
            return StateMutability.VIEW

    return StateMutability.PURE


def _base_type(node: Node, expression_type: Type | None) -> Type:
    if expression_type is None:
        raise InvariantViolationError("base expression has no resolved type", node)
    return expression_type


def _classify_member_access(access: MemberAccess) -> StateMutability:
    base_type = _base_type(access, access.expression.type)
    member = access.member_name

    if base_type.category in _BALANCE_CATEGORIES:
        if member == "balance" and access.referenced_declaration is None:
            return StateMutability.VIEW
        return StateMutability.PURE

    match base_type.category:
        case TypeCategory.MAGIC:
            # Kind of magic does not matter, only the member name
            if member not in _PURE_MAGIC_MEMBERS:
                return StateMutability.VIEW

        case TypeCategory.STRUCT:
            # TODO: reading a whole storage struct by value could be told apart from member reads
            if base_type.data_stored_in(DataLocation.STORAGE):
                return _read_or_write(access.lvalue_requested)

        case TypeCategory.ARRAY:
            if (
                member == "length"
                and isinstance(base_type, ArrayType)
                and base_type.is_dynamically_sized
                and base_type.data_stored_in(DataLocation.STORAGE)
            ):
                return _read_or_write(access.lvalue_requested)

    return StateMutability.PURE


def _classify_index_access(access: IndexAccess) -> StateMutability:
    if access.index_expression is None:
        raise InvariantViolationError("index access without index expression", access)

    base_type = _base_type(access, access.base_expression.type)
    if base_type.data_stored_in(DataLocation.STORAGE):
        return _read_or_write(access.lvalue_requested)
    return StateMutability.PURE


def _classify_function_call(call: FunctionCall) -> StateMutability:
    # Conversions and struct construction have no effect of their own
    if call.kind is not FunctionCallKind.FUNCTION_CALL:
        return StateMutability.PURE

    callee_type = call.expression.type
    if not isinstance(callee_type, FunctionType):
        raise InvariantViolationError("function call callee is not function-typed", call)
    return callee_type.state_mutability.for_caller()


def _classify_modifier_invocation(
    invocation: ModifierInvocation,
    inferred_modifiers: Mapping[ModifierDefinition, StateMutability],
) -> StateMutability:
    modifier = invocation.name.referenced_declaration
    if not isinstance(modifier, ModifierDefinition):
        raise InvariantViolationError(
            f"{invocation.name.name!r} does not resolve to a modifier definition", invocation
        )
    if modifier not in inferred_modifiers:
        raise InvariantViolationError(
            f"modifier {modifier.name!r} has no inferred mutability", invocation
        )
    return inferred_modifiers[modifier]
