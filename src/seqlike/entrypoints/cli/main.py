"""SEQLIKE CLI entry point.

Defines the top-level ``seqlike`` command (via Click-Extra) and registers the
subcommands exposed by the project.

Currently available commands
- ``seqlike backends``: list registered sequence backends.
- ``seqlike check``: run the conformance battery against them.

Notes
- The CLI version is sourced from `seqlike.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Additional commands should be registered here via ``seqlike.add_command(...)``.

Examples
    $ seqlike --version
    $ seqlike check -b chunk
"""

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from seqlike import __version__
from seqlike.config import LOGGER_LEVELS_ENV
from seqlike.logging import config_console_handler, log_startup
from seqlike.registry import default_registry

from .check import backends as backends_command
from .check import check as check_command
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """SEQLIKE command-line interface.

    SEQLIKE binds several immutable sequence representations (a contiguous
    array, a persistent linked list and a chunk tree) to one capability
    interface, and checks that every one of them behaves identically under
    take, drop, reverse, prepend, prepend-all and concat.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L seqlike.conformance=DEBUG -L hypothesis=ERROR) or via "
        f"{LOGGER_LEVELS_ENV} (comma/space list)."
    ),
    envvar=LOGGER_LEVELS_ENV,
    default=("hypothesis=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def seqlike(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """SEQLIKE command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    # 2) configure root logger; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 3) set per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 4) registry shared with subcommands (callers may inject their own)
    if ctx.obj is None:
        ctx.obj = default_registry()

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        backends=ctx.obj.labels(),
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


seqlike.add_command(backends_command)
seqlike.add_command(check_command)
