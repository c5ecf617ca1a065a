"""CLI application entry point and command routing for bhr.

This module is the **sole error boundary** for the entire application.
It catches :class:`~bhr.exceptions.BhrError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* Results go to stdout via :func:`~bhr.cli.console.emit`; diagnostics go
  to stderr via the Rich console.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from bhr.cli import exit_codes
from bhr.cli.console import console, emit, escape
from bhr.cli.log_config import configure_logging
from bhr.exceptions import BhrError
from bhr.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands:
    * ``bhr directory`` (``dir``)          — print the org chart
    * ``bhr employee`` (``emp``, ``get``)  — show one employee
    """
    parser = argparse.ArgumentParser(
        prog="bhr",
        description="A command line interface for BambooHR.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log API requests and processing details to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    directory = subparsers.add_parser(
        "directory",
        aliases=["dir"],
        help="List directory of employees.",
    )
    directory.add_argument(
        "--department",
        default="",
        help="Filter by department (case insensitive regex).",
    )
    directory.add_argument(
        "--title",
        default="",
        help="Filter by title (case insensitive regex); needs --department.",
    )
    directory.set_defaults(handler=_handle_directory)

    employee = subparsers.add_parser(
        "employee",
        aliases=["emp", "get"],
        help="Show information about an employee.",
    )
    employee.add_argument(
        "--name",
        default="",
        help="Name of employee (API key owner if unspecified).",
    )
    employee.add_argument(
        "--id",
        type=int,
        default=None,
        dest="employee_id",
        help="ID of employee; takes precedence over --name.",
    )
    employee.add_argument(
        "--image",
        action="store_true",
        help="Display profile image using sixel.",
    )
    employee.set_defaults(handler=_handle_employee)

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_directory(args: argparse.Namespace) -> int:
    """Print the org chart, optionally filtered by department and title."""
    from bhr.config import load_settings
    from bhr.core.directory_service import DirectoryService
    from bhr.core.record_filter import build_record_filter
    from bhr.infra.bamboohr_provider import BambooHRProvider

    # Reject bad patterns before reading settings or touching the network.
    build_record_filter(args.department, args.title)

    settings = load_settings()
    with BambooHRProvider(settings) as provider:
        output = DirectoryService(provider).render(args.department, args.title)

    emit(output + "\n")
    return exit_codes.SUCCESS


def _handle_employee(args: argparse.Namespace) -> int:
    """Print the details of one employee."""
    from bhr.config import load_settings
    from bhr.core.employee_service import EmployeeService
    from bhr.core.record_filter import build_name_filter
    from bhr.infra.bamboohr_provider import BambooHRProvider
    from bhr.infra.sixel_image import encode_sixel

    build_name_filter(args.name)

    employee_id = None if args.employee_id is None else str(args.employee_id)

    settings = load_settings()
    with BambooHRProvider(settings) as provider:
        output = EmployeeService(provider).describe(
            employee_id=employee_id,
            name=args.name,
            photo_encoder=encode_sixel if args.image else None,
        )

    emit("\n" + output + "\n")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the bhr CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(verbose=args.verbose)
    return args.handler(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except BhrError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
