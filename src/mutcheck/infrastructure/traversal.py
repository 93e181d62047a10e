"""AST traversal helpers.

Functional alternative to double-dispatch visitors: iterate nodes,
then pattern-match on the node class.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from mutcheck.domain.model.nodes import (
    ContractDefinition,
    FunctionDefinition,
    ModifierDefinition,
    Node,
    SourceUnit,
)

# Nodes that open their own analysis scope
_SCOPE_BOUNDARIES = (ContractDefinition, FunctionDefinition, ModifierDefinition)


def post_order(root: Node) -> Iterator[Node]:
    """Walk the subtree of root, children before parents.

    Root itself is yielded last. Nested scopes below root (contracts,
    functions, modifiers) are yielded as a single node without their
    children: they are walked on their own.

    Args:
        root: Node to start from

    Yields:
        Nodes in post-order, siblings in source order
    """
    stack: list[tuple[Node, bool]] = [(root, False)]

    while stack:
        node, expanded = stack.pop()

        if expanded or (node is not root and isinstance(node, _SCOPE_BOUNDARIES)):
            yield node
            continue

        stack.append((node, True))
        # Reverse so the first child is popped first
        stack.extend((child, False) for child in reversed(node.children()))


def collect_contracts(source_units: Iterable[Node]) -> tuple[ContractDefinition, ...]:
    """Collect top-level contracts of all source units, in source order.

    Raises:
        InvariantViolationError: If a root is not a SourceUnit (FAIL-FIRST)
    """
    from mutcheck.domain.exceptions import InvariantViolationError

    contracts: list[ContractDefinition] = []
    for unit in source_units:
        if not isinstance(unit, SourceUnit):
            raise InvariantViolationError(
                f"expected SourceUnit root, got {type(unit).__name__}", unit
            )
        contracts.extend(unit.contracts)
    return tuple(contracts)
