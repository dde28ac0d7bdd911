"""Typer application and CLI entry point for apiwrap.

The CLI is a thin shell over the vendor SDKs: ``apiwrap list <vendor>
<resource>`` opens the vendor client from ``config.json`` and environment
variables, streams the resource through its paginator, and prints the
records as a table (or JSON with ``--json``).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. Unhandled exceptions are written to a crash log under
the data directory.
"""

from __future__ import annotations

import asyncio
import logging
import signal
import sys
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Optional

import typer

from apiwrap import __version__, commonroom, discourse, remote, rippling, vercel
from apiwrap.client.vendor import VendorClient
from apiwrap.exceptions import ApiwrapError, ConfigError
from apiwrap.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INVALID_USAGE
from apiwrap.pagination import AsyncPaginator
from apiwrap.types.base import ApiModel

app = typer.Typer(
    name="apiwrap",
    help="List records from Rippling, Remote, Vercel, Discourse and Common Room.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


# ------------------------------------------------------------------ #
# Vendor registry
# ------------------------------------------------------------------ #


@dataclass
class Listing:
    """A resource the CLI can list: its item model and how to stream it."""

    model: type[ApiModel]
    stream: Callable[[Any], AsyncPaginator]


@dataclass
class VendorEntry:
    client: type[VendorClient]
    env: str
    listings: dict[str, Listing] = field(default_factory=dict)


VENDORS: dict[str, VendorEntry] = {
    "rippling": VendorEntry(
        rippling.Client,
        "RIPPLING_API_TOKEN",
        {
            "workers": Listing(rippling.Worker, lambda c: c.workers().list_stream()),
            "departments": Listing(rippling.Department, lambda c: c.departments().list_stream()),
            "users": Listing(rippling.User, lambda c: c.users().list_stream()),
        },
    ),
    "remote": VendorEntry(
        remote.Client,
        "REMOTE_API_TOKEN",
        {
            "employments": Listing(
                remote.MinimalEmployment, lambda c: c.employments().get_index_stream()
            ),
        },
    ),
    "vercel": VendorEntry(
        vercel.Client,
        "VERCEL_API_TOKEN",
        {
            "projects": Listing(vercel.Project, lambda c: c.projects().list_stream()),
            "deployments": Listing(vercel.Deployment, lambda c: c.deployments().list_stream()),
        },
    ),
    "discourse": VendorEntry(discourse.Client, "DISCOURSE_API_KEY"),
    "commonroom": VendorEntry(commonroom.Client, "COMMONROOM_API_TOKEN"),
}


def _open_client(vendor: str) -> VendorClient:
    """Build the vendor client from ``config.json`` and the environment."""
    return VENDORS[vendor].client.new_from_env()


# ------------------------------------------------------------------ #
# Root callback
# ------------------------------------------------------------------ #


class _OutputLogHandler(logging.Handler):
    """Forward library log records to the active OutputManager's debug stream."""

    def emit(self, record: logging.LogRecord) -> None:
        from apiwrap.output import debug

        debug(f"{record.name}: {record.getMessage()}")


_log_handler = _OutputLogHandler()


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("apiwrap")
    if verbose:
        if _log_handler not in logger.handlers:
            logger.addHandler(_log_handler)
        logger.setLevel(logging.DEBUG)
    else:
        logger.removeHandler(_log_handler)
        logger.setLevel(logging.NOTSET)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"apiwrap {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Initialise the global :class:`~apiwrap.output.OutputManager` from CLI flags.

    Without ``--json`` or ``--plain`` the format stored in the global config
    file applies.
    """
    from apiwrap.config import load_global_config
    from apiwrap.output import OutputFormat, OutputManager, get_output, set_output

    warning: Optional[str] = None
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN
    else:
        fmt = OutputFormat.AUTO
        try:
            configured = load_global_config().output.format
            fmt = OutputFormat(configured)
        except ConfigError as exc:
            warning = str(exc)
        except ValueError:
            warning = f"Unknown output format in config: {configured!r}"

    set_output(
        OutputManager(
            format=fmt,
            no_color=no_color,
            quiet=quiet,
            verbose=verbose,
        )
    )
    _configure_logging(verbose)
    if warning is not None:
        get_output().warning(warning)


# ------------------------------------------------------------------ #
# Commands
# ------------------------------------------------------------------ #


async def _collect(vendor: str, resource: str, limit: Optional[int]) -> tuple[list[Any], int]:
    listing = VENDORS[vendor].listings[resource]
    async with _open_client(vendor) as client:
        paginator = listing.stream(client)
        items = await paginator.to_list(limit)
        return items, paginator.pages_fetched


@app.command("list")
def list_command(
    vendor: str = typer.Argument(..., help="Vendor name, see `apiwrap vendors`."),
    resource: str = typer.Argument(..., help="Resource to list, e.g. workers."),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-l", min=1, help="Stop after this many records."
    ),
) -> None:
    """Stream every record of a resource across all pages and print them."""
    from apiwrap.output import error, get_output, info

    entry = VENDORS.get(vendor)
    if entry is None:
        error(f"Unknown vendor '{vendor}'. Available: {', '.join(sorted(VENDORS))}")
        raise typer.Exit(code=EXIT_INVALID_USAGE)
    listing = entry.listings.get(resource)
    if listing is None:
        available = ", ".join(sorted(entry.listings)) or "(none)"
        error(f"'{vendor}' has no listable resource '{resource}'. Available: {available}")
        raise typer.Exit(code=EXIT_INVALID_USAGE)

    try:
        items, pages = asyncio.run(_collect(vendor, resource, limit))
    except ApiwrapError as exc:
        output = get_output()
        output.error(str(exc))
        if isinstance(exc, ConfigError):
            output.suggest(f"Set {entry.env} or add a '{vendor}' section to config.json")
        raise typer.Exit(code=exc.exit_code) from None

    get_output().print_models(items, listing.model, title=f"{vendor} {resource}")
    info(f"{len(items)} record(s) from {pages} page(s)")


@app.command("vendors")
def vendors_command() -> None:
    """List the supported vendors and their listable resources."""
    from apiwrap.output import get_output

    rows = [
        [name, entry.env, ", ".join(entry.listings) or "-"]
        for name, entry in VENDORS.items()
    ]
    get_output().print_table(["vendor", "credential", "resources"], rows, title="Vendors")


# ------------------------------------------------------------------ #
# Entry point
# ------------------------------------------------------------------ #


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path."""
    from apiwrap.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``apiwrap`` console script.

    :class:`~apiwrap.exceptions.ApiwrapError` instances cause a clean exit
    with the error's ``exit_code``. All other exceptions produce a crash log
    and a generic failure exit.
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from apiwrap.output import error

        if isinstance(exc, ApiwrapError):
            error(str(exc))
            sys.exit(exc.exit_code)
        log_path = _write_crash_log(exc)
        error(f"Unexpected error. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)
