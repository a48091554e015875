import sys
from enum import Enum

import click
import httpx
from loguru import logger

from vespa_client import lib
from vespa_client.common import ConfigurationError, error_detail_of
from vespa_client.model import ServiceClass, StatusResult


class _Style(Enum):
    ready = "ready"
    failure = "failure"
    detail = "detail"


_STYLE_COLORS = {
    _Style.ready: "green",
    _Style.failure: "red",
    _Style.detail: "yellow",
}


def _echo_styled(message: str, style: _Style):
    click.echo(click.style(message, fg=_STYLE_COLORS[style]))


_log_handler_id: int | None = None


def _configure_logging(verbose: bool):
    global _log_handler_id

    if _log_handler_id is not None:
        logger.remove(_log_handler_id)
        _log_handler_id = None

    if not verbose:
        logger.disable("vespa_client")
        return

    _log_handler_id = logger.add(
        sys.stderr,
        level="DEBUG",
        format="<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )
    logger.enable("vespa_client")


def _destructure_context(ctx: click.Context) -> tuple[int, httpx.Client | None]:
    """
    Collect all parameters passed into the main command.

    Args:
        ctx: Click context

    Returns:
        Tuple containing request timeout in seconds and the HTTP client to use, if one was provided
    """
    return (
        int(ctx.obj["TIMEOUT_SECS"]),
        ctx.obj.get("HTTP_CLIENT")
    )


def _render_status_result(result: StatusResult):
    target = result.target
    headline = f"{target.service.label} at {target.url}"

    if result.ready:
        _echo_styled(f"{headline} is ready", _Style.ready)
        return

    _echo_styled(f"{headline} is not ready", _Style.failure)
    _echo_styled(error_detail_of(result.status_code, result.error), _Style.detail)


def _check_and_report(ctx: click.Context, service: ServiceClass, target_value: str | None):
    timeout_secs, client = _destructure_context(ctx)

    try:
        target = lib.resolve_target(service, target_value)
    except ConfigurationError as e:
        raise click.BadParameter(str(e), ctx=ctx, param_hint="'-t' / '--target'") from e

    result = lib.check_status(target, client=client, timeout_secs=timeout_secs)
    _render_status_result(result)

    if not result.ready:
        ctx.exit(1)


def target_option(envvar: str | None = None):
    return click.option(
        "-t", "--target", type=str, default=None, envvar=envvar,
        help="absolute URL of the service to check or `local`"
    )


@click.group()
@click.pass_context
@click.option(
    "--timeout-secs", type=click.IntRange(min=1), default=10, envvar="VESPA_TIMEOUT_SECS",
    help="seconds until a request times out"
)
@click.option(
    "-v", "--verbose", is_flag=True, default=False,
    help="log requests and responses to stderr"
)
def app(ctx: click.Context, timeout_secs: int, verbose: bool):
    """Command-line client for Vespa deployments."""
    ctx.ensure_object(dict)
    ctx.obj["TIMEOUT_SECS"] = timeout_secs
    _configure_logging(verbose)


@app.group(invoke_without_command=True)
@click.pass_context
@target_option(envvar="VESPA_TARGET")
def status(ctx: click.Context, target: str | None):
    """
    Verify that a service is ready to use.

    Checks the query API if no service is given.
    """
    ctx.obj["TARGET"] = target

    if ctx.invoked_subcommand is None:
        _check_and_report(ctx, ServiceClass.query, target)


def _target_of(ctx: click.Context, target: str | None) -> str | None:
    return target or ctx.obj.get("TARGET")


@status.command()
@click.pass_context
@target_option()
def deploy(ctx: click.Context, target: str | None):
    """Verify that the deploy API is ready."""
    _check_and_report(ctx, ServiceClass.deploy, _target_of(ctx, target))


@status.command()
@click.pass_context
@target_option()
def query(ctx: click.Context, target: str | None):
    """Verify that the query API is ready."""
    _check_and_report(ctx, ServiceClass.query, _target_of(ctx, target))


status.add_command(query, name="container")


@status.command()
@click.pass_context
@target_option()
def document(ctx: click.Context, target: str | None):
    """Verify that the document API is ready."""
    _check_and_report(ctx, ServiceClass.document, _target_of(ctx, target))


def run_cli():
    # replaces loguru's default stderr handler
    logger.remove()
    app(max_content_width=120)


if __name__ == "__main__":
    run_cli()
