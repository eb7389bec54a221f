"""Infrastructure adapters: logging and the IBGE HTTP boundary."""
