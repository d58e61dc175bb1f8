"""buildnotice CLI — Typer-based command-line interface.

Provides the ``buildnotice`` command for previewing notification bodies
and composed messages from a JSON build event file.

All output uses Rich for formatted terminal display.
"""
