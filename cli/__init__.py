"""CLI package for the GitHub Copilot client

This package provides a command-line interface that lists agents and
models, sends chat completions and generates embeddings.
"""

from cli.main import main, run_command

__all__ = [
    "main",
    "run_command",
]
