"""Domain layer: AST model, lattice, diagnostics and ports."""
