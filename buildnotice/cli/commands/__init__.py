"""Subcommands registered on the ``buildnotice`` Typer app."""
