"""Command line interface package."""

from consulta_ibge.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
