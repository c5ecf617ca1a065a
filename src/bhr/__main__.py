"""Allow ``python -m bhr`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m bhr`` behaves identically to the ``bhr`` console
script.
"""

from __future__ import annotations

from bhr.cli.app import cli

if __name__ == "__main__":
    cli()
