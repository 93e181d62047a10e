"""Infrastructure: AST traversal."""
