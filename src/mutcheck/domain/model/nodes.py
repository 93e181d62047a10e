"""Annotated AST consumed by the checker.

The parser and type resolver are upstream collaborators: they build these
nodes and fill in the annotations (resolved declarations, expression types,
lvalue flags, call kinds). The checker only reads them.

Nodes compare and hash by identity (eq=False): two structurally equal
functions are still different functions. Annotation fields are mutable
because resolution happens after construction (recursive calls refer to
the function being defined).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mutcheck.domain.model.enums import FunctionCallKind
from mutcheck.domain.model.mutability import StateMutability

if TYPE_CHECKING:
    from mutcheck.domain.model.location import Location
    from mutcheck.domain.model.types import Type


@dataclass(eq=False, slots=True, kw_only=True)
class Node:
    """Base of all AST nodes.

    Attributes:
        location: Source span of the node
    """

    location: Location

    def children(self) -> tuple[Node, ...]:
        """Direct children in source visiting order."""
        return ()


# =============================================================================
# DECLARATIONS
# =============================================================================


@dataclass(eq=False, slots=True, kw_only=True)
class Declaration(Node):
    name: str


@dataclass(eq=False, slots=True, kw_only=True)
class SourceUnit(Node):
    """Root of one parsed source file."""

    nodes: tuple[Node, ...] = ()

    def children(self) -> tuple[Node, ...]:
        return self.nodes

    @property
    def contracts(self) -> tuple[ContractDefinition, ...]:
        """Top-level contract definitions in source order."""
        return tuple(n for n in self.nodes if isinstance(n, ContractDefinition))


@dataclass(eq=False, slots=True, kw_only=True)
class ContractDefinition(Declaration):
    """Contract, library or interface body.

    Attributes:
        nodes: Members in source order
    """

    nodes: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("contract name must not be empty")

    def children(self) -> tuple[Node, ...]:
        return self.nodes

    @property
    def state_variables(self) -> tuple[VariableDeclaration, ...]:
        return tuple(n for n in self.nodes if isinstance(n, VariableDeclaration))

    @property
    def defined_functions(self) -> tuple[FunctionDefinition, ...]:
        return tuple(n for n in self.nodes if isinstance(n, FunctionDefinition))

    @property
    def function_modifiers(self) -> tuple[ModifierDefinition, ...]:
        return tuple(n for n in self.nodes if isinstance(n, ModifierDefinition))

    @property
    def defined_structs(self) -> tuple[StructDefinition, ...]:
        return tuple(n for n in self.nodes if isinstance(n, StructDefinition))


@dataclass(eq=False, slots=True, kw_only=True)
class StructDefinition(Declaration):
    members: tuple[VariableDeclaration, ...] = ()

    def children(self) -> tuple[Node, ...]:
        return self.members


@dataclass(eq=False, slots=True, kw_only=True)
class VariableDeclaration(Declaration):
    """State variable, local variable, parameter or struct member.

    Attributes:
        type: Resolved type
        value: Initializer expression, if any
        is_state_variable: True for contract-level storage variables
    """

    type: Type | None = None
    value: Expression | None = None
    is_state_variable: bool = False

    def children(self) -> tuple[Node, ...]:
        return (self.value,) if self.value is not None else ()


@dataclass(eq=False, slots=True, kw_only=True)
class MagicVariableDeclaration(Declaration):
    """Language-provided global: this, super, now, block, msg, tx, ..."""

    type: Type

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("magic variable name must not be empty")


@dataclass(eq=False, slots=True, kw_only=True)
class FunctionDefinition(Declaration):
    """Function with a declared state mutability.

    Name is empty for the fallback function.

    Attributes:
        parameters: Input parameters
        return_parameters: Named or unnamed return values
        modifiers: Modifier invocations in the header, in order
        body: Function body, None if unimplemented
        state_mutability: Declared level (NONPAYABLE when not written)
        is_constructor: True for the contract constructor
        super_function: Base function this one overrides (annotation)
    """

    parameters: tuple[VariableDeclaration, ...] = ()
    return_parameters: tuple[VariableDeclaration, ...] = ()
    modifiers: tuple[ModifierInvocation, ...] = ()
    body: Block | None = None
    state_mutability: StateMutability = StateMutability.NONPAYABLE
    is_constructor: bool = False
    super_function: FunctionDefinition | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.state_mutability, StateMutability):
            raise TypeError(
                f"state_mutability must be StateMutability, got {type(self.state_mutability).__name__}"
            )
        if self.is_constructor and self.super_function is not None:
            raise ValueError("constructor cannot override a base function")

    @property
    def is_implemented(self) -> bool:
        return self.body is not None

    def children(self) -> tuple[Node, ...]:
        body = (self.body,) if self.body is not None else ()
        return (*self.parameters, *self.return_parameters, *self.modifiers, *body)


@dataclass(eq=False, slots=True, kw_only=True)
class ModifierDefinition(Declaration):
    """Modifier: wraps function bodies at the `_` placeholder.

    Has no declared mutability, it is inferred from the body.
    """

    parameters: tuple[VariableDeclaration, ...] = ()
    body: Block

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("modifier name must not be empty")

    def children(self) -> tuple[Node, ...]:
        return (*self.parameters, self.body)


@dataclass(eq=False, slots=True, kw_only=True)
class ModifierInvocation(Node):
    """`onlyOwner` / `costs(price)` in a function header."""

    name: Identifier
    arguments: tuple[Expression, ...] = ()

    def children(self) -> tuple[Node, ...]:
        return (self.name, *self.arguments)


# =============================================================================
# STATEMENTS
# =============================================================================


@dataclass(eq=False, slots=True, kw_only=True)
class Statement(Node):
    pass


@dataclass(eq=False, slots=True, kw_only=True)
class Block(Statement):
    statements: tuple[Statement, ...] = ()

    def children(self) -> tuple[Node, ...]:
        return self.statements


@dataclass(eq=False, slots=True, kw_only=True)
class PlaceholderStatement(Statement):
    """`_;` inside a modifier body."""


@dataclass(eq=False, slots=True, kw_only=True)
class IfStatement(Statement):
    condition: Expression
    true_body: Statement
    false_body: Statement | None = None

    def children(self) -> tuple[Node, ...]:
        false_body = (self.false_body,) if self.false_body is not None else ()
        return (self.condition, self.true_body, *false_body)


@dataclass(eq=False, slots=True, kw_only=True)
class WhileStatement(Statement):
    condition: Expression
    body: Statement
    is_do_while: bool = False

    def children(self) -> tuple[Node, ...]:
        return (self.condition, self.body)


@dataclass(eq=False, slots=True, kw_only=True)
class ForStatement(Statement):
    body: Statement
    initialization: Statement | None = None
    condition: Expression | None = None
    loop_expression: ExpressionStatement | None = None

    def children(self) -> tuple[Node, ...]:
        parts = (self.initialization, self.condition, self.loop_expression, self.body)
        return tuple(p for p in parts if p is not None)


@dataclass(eq=False, slots=True, kw_only=True)
class Continue(Statement):
    pass


@dataclass(eq=False, slots=True, kw_only=True)
class Break(Statement):
    pass


@dataclass(eq=False, slots=True, kw_only=True)
class Throw(Statement):
    pass


@dataclass(eq=False, slots=True, kw_only=True)
class Return(Statement):
    expression: Expression | None = None

    def children(self) -> tuple[Node, ...]:
        return (self.expression,) if self.expression is not None else ()


@dataclass(eq=False, slots=True, kw_only=True)
class VariableDeclarationStatement(Statement):
    """`uint a = 1;` / `var (a, , b) = f();`

    Attributes:
        declarations: Declared variables, None for skipped tuple slots
        initial_value: Right-hand side, if any
    """

    declarations: tuple[VariableDeclaration | None, ...] = ()
    initial_value: Expression | None = None

    def children(self) -> tuple[Node, ...]:
        declared = tuple(d for d in self.declarations if d is not None)
        value = (self.initial_value,) if self.initial_value is not None else ()
        return (*declared, *value)


@dataclass(eq=False, slots=True, kw_only=True)
class ExpressionStatement(Statement):
    expression: Expression

    def children(self) -> tuple[Node, ...]:
        return (self.expression,)


@dataclass(eq=False, slots=True, kw_only=True)
class InlineAssembly(Statement):
    """`assembly { ... }`. Body kept as opaque text."""

    operations: str = ""


# =============================================================================
# EXPRESSIONS
# =============================================================================


@dataclass(eq=False, slots=True, kw_only=True)
class Expression(Node):
    """Base of expressions.

    Attributes:
        type: Resolved type (annotation)
        lvalue_requested: Expression is an assignment target (annotation)
    """

    type: Type | None = None
    lvalue_requested: bool = False


@dataclass(eq=False, slots=True, kw_only=True)
class Conditional(Expression):
    condition: Expression
    true_expression: Expression
    false_expression: Expression

    def children(self) -> tuple[Node, ...]:
        return (self.condition, self.true_expression, self.false_expression)


@dataclass(eq=False, slots=True, kw_only=True)
class Assignment(Expression):
    """`a = b`, `a += b`. The left side carries lvalue_requested."""

    left: Expression
    right: Expression
    operator: str = "="

    def children(self) -> tuple[Node, ...]:
        return (self.left, self.right)


@dataclass(eq=False, slots=True, kw_only=True)
class TupleExpression(Expression):
    components: tuple[Expression | None, ...] = ()
    is_inline_array: bool = False

    def children(self) -> tuple[Node, ...]:
        return tuple(c for c in self.components if c is not None)


@dataclass(eq=False, slots=True, kw_only=True)
class UnaryOperation(Expression):
    """`!a`, `-a`, `++a`, `a--`, `delete a`."""

    operator: str
    sub_expression: Expression
    is_prefix: bool = True

    def children(self) -> tuple[Node, ...]:
        return (self.sub_expression,)


@dataclass(eq=False, slots=True, kw_only=True)
class BinaryOperation(Expression):
    left: Expression
    operator: str
    right: Expression

    def children(self) -> tuple[Node, ...]:
        return (self.left, self.right)


@dataclass(eq=False, slots=True, kw_only=True)
class FunctionCall(Expression):
    """Call syntax: function call, type conversion or struct construction.

    Attributes:
        expression: Callee expression
        arguments: Positional or named arguments
        names: Argument names for named-argument calls
        kind: What the call does (annotation)
    """

    expression: Expression
    arguments: tuple[Expression, ...] = ()
    names: tuple[str, ...] = ()
    kind: FunctionCallKind = FunctionCallKind.FUNCTION_CALL

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.names and len(self.names) != len(self.arguments):
            raise ValueError(
                f"named call needs one name per argument, got {len(self.names)} names "
                f"for {len(self.arguments)} arguments"
            )

    def children(self) -> tuple[Node, ...]:
        return (self.expression, *self.arguments)


@dataclass(eq=False, slots=True, kw_only=True)
class NewExpression(Expression):
    """`new C` / `new uint[]` (callee of a FunctionCall)."""

    type_name: str


@dataclass(eq=False, slots=True, kw_only=True)
class MemberAccess(Expression):
    """`base.member`.

    Attributes:
        expression: Base expression
        member_name: Accessed member
        referenced_declaration: User declaration the member resolves to, if any
    """

    expression: Expression
    member_name: str
    referenced_declaration: Declaration | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.member_name:
            raise ValueError("member_name must not be empty")

    def children(self) -> tuple[Node, ...]:
        return (self.expression,)


@dataclass(eq=False, slots=True, kw_only=True)
class IndexAccess(Expression):
    """`base[index]`. Index is None only in type expressions like `uint[]`."""

    base_expression: Expression
    index_expression: Expression | None = None

    def children(self) -> tuple[Node, ...]:
        index = (self.index_expression,) if self.index_expression is not None else ()
        return (self.base_expression, *index)


@dataclass(eq=False, slots=True, kw_only=True)
class Identifier(Expression):
    """Name reference.

    Attributes:
        name: Identifier text
        referenced_declaration: Resolved declaration (annotation)
    """

    name: str
    referenced_declaration: Declaration | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("identifier name must not be empty")


@dataclass(eq=False, slots=True, kw_only=True)
class ElementaryTypeNameExpression(Expression):
    """`uint8` in `uint8(x)`."""

    type_name: str


@dataclass(eq=False, slots=True, kw_only=True)
class Literal(Expression):
    value: str
