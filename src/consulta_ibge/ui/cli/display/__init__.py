"""Display management for CLI interface."""

from consulta_ibge.ui.cli.display.response import ResponseDisplay

__all__ = ["ResponseDisplay"]
