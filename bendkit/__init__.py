"""Syntax tree, desugaring passes, interaction nets, compiler options and command-line parsing for a Bend-style compiler."""

__version__ = "0.1.0"

__all__ = ["cli", "hvmc_to_net", "imp_ast", "kwargs", "map_get", "net", "options"]