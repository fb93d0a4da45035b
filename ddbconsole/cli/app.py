"""
cli/app.py - Main CLI entry point

Click command that builds the boto3 session, the DynamoDB backend and the
console state, then runs the full-screen console until the operator quits.

Command:
    ddbconsole                          # default region / credential chain
    ddbconsole -r ap-northeast-2 -p dev
    ddbconsole --lang en --page-size 25
    ddbconsole --log-file ddb.log --debug
    ddbconsole --version

Logging:
    The screen belongs to the renderer, so package loggers go to a
    NullHandler unless --log-file is given. Startup errors are printed with
    the rich console helpers and exit with status 1.

Usage:
    $ ddbconsole
    $ python -m ddbconsole
"""

import logging

import click

from ddbconsole.core.config import get_default_profile, get_default_region, get_version
from ddbconsole.i18n import SUPPORTED_LANGS, t

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(log_file: str | None, debug: bool) -> None:
    """Route package logs to a file, or nowhere while the screen is in use."""
    for name in ("botocore", "boto3", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)

    package_logger = logging.getLogger("ddbconsole")
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG if debug else logging.INFO,
            format=LOG_FORMAT,
            datefmt=LOG_DATEFMT,
        )
        package_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    elif not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())


def run_console(state, backend) -> None:
    """Full-screen loop: raw keyboard input + rich Live on the alternate screen."""
    from rich.live import Live

    from ddbconsole.cli.ui.console import console
    from ddbconsole.cli.ui.render import render_frame
    from ddbconsole.cli.ui.terminal import RawTerminal
    from ddbconsole.core.state.runner import ConsoleRunner

    with RawTerminal() as terminal, Live(
        render_frame(state),
        console=console,
        screen=True,
        auto_refresh=False,
        transient=True,
    ) as live:

        def render(current) -> None:
            live.update(render_frame(current), refresh=True)

        ConsoleRunner(state, backend, read_key=terminal.read_key, render=render).run()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(get_version(), prog_name="ddbconsole")
@click.option("-r", "--region", default=None, help="AWS region (default: AWS_DEFAULT_REGION or us-east-1)")
@click.option("-p", "--profile", default=None, help="AWS profile (default: AWS_PROFILE / credential chain)")
@click.option("--page-size", type=click.IntRange(min=1), default=None, help="Items per scan page")
@click.option(
    "--lang",
    type=click.Choice(list(SUPPORTED_LANGS)),
    default="ko",
    help="UI 언어 설정 / UI language (ko: 한국어, en: English)",
)
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Write the activity log to a file")
@click.option("--debug", is_flag=True, help="Verbose logging (with --log-file)")
def cli(
    region: str | None,
    profile: str | None,
    page_size: int | None,
    lang: str,
    log_file: str | None,
    debug: bool,
) -> None:
    """ddbconsole - DynamoDB table console"""
    from ddbconsole.i18n import set_lang

    set_lang(lang)
    configure_logging(log_file, debug)

    from rich.markup import escape

    from ddbconsole.cli.ui.console import print_error, print_info, print_warning
    from ddbconsole.core.aws import DynamoDBBackend, create_session
    from ddbconsole.core.exceptions import ConsoleError
    from ddbconsole.core.state.app import ConsoleState

    if debug and not log_file:
        print_warning(t("cli.debug_without_log_file"))

    region = region or get_default_region()
    profile = profile or get_default_profile()

    try:
        session = create_session(profile=profile, region=region)
        if session.get_credentials() is None:
            print_error(t("cli.no_credentials"))
            raise SystemExit(1)
        backend = DynamoDBBackend(session, region)
    except ConsoleError as e:
        logger.debug("startup failed", exc_info=True)
        print_error(t("cli.startup_failed", error=escape(str(e))))
        raise SystemExit(1) from e

    state = ConsoleState(region, page_size=page_size)
    logger.info("starting console in %s (profile=%s)", region, profile or "default")
    try:
        run_console(state, backend)
    except KeyboardInterrupt:
        logger.debug("interrupted")

    print_info(t("cli.goodbye", count=len(state.log)))


if __name__ == "__main__":
    cli()
