"""Documentation link validator and rewriter."""
