"""Command-line layer (Typer + Rich).

Only presentation and input handling live here; the operations themselves are
built in `core.services`.
"""
