"""Command line argument handling package."""

from consulta_ibge.ui.cli.args.parser import ArgumentParser
from consulta_ibge.ui.cli.args.options import CLIArgs, DistritoArgs, EstadoArgs

__all__ = ["ArgumentParser", "CLIArgs", "DistritoArgs", "EstadoArgs"]
