"""Domain core: error taxonomy, exceptions and identifier rules."""
