"""Command execution package for CLI."""

from consulta_ibge.ui.cli.commands.query import QueryCommand

__all__ = ["QueryCommand"]
