"""buildevents command line interface."""

import click
import uvicorn
from dotenv import load_dotenv

from . import __version__
from .api import create_fastapi_app
from .config import (
    DEFAULT_API_HOST,
    DEFAULT_CI_PROVIDER,
    DEFAULT_DATASET,
    DEFAULT_HOST,
    DEFAULT_PORT,
    FailureResponse,
    Settings,
    load_extra_fields,
)
from .errors import ConfigError
from .logging_config import setup_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.command(
    name="buildevents",
    help="""
    The buildevents server receives GitLab CI pipeline and job webhooks and
    sends them to Honeycomb as trace spans.
    """,
)
@click.version_option(__version__, prog_name="buildevents")
@click.option(
    "-k",
    "--apikey",
    envvar="BUILDEVENT_APIKEY",
    default="",
    help="[env.BUILDEVENT_APIKEY] the Honeycomb authentication token. "
    "Events are printed to stdout when unset.",
)
@click.option(
    "-d",
    "--dataset",
    envvar="BUILDEVENT_DATASET",
    default=DEFAULT_DATASET,
    show_default=True,
    help="[env.BUILDEVENT_DATASET] the name of the Honeycomb dataset to which to send these events",
)
@click.option(
    "-a",
    "--apihost",
    envvar="BUILDEVENT_APIHOST",
    default=DEFAULT_API_HOST,
    show_default=True,
    help="[env.BUILDEVENT_APIHOST] the hostname for the Honeycomb API server",
)
@click.option(
    "-f",
    "--filename",
    envvar="BUILDEVENT_FILE",
    default=None,
    type=click.Path(dir_okay=False),
    help="[env.BUILDEVENT_FILE] the path of a text file holding arbitrary key=val pairs "
    "(multi-line-capable, logfmt style) to be added to every event",
)
@click.option(
    "-p",
    "--provider",
    envvar="BUILDEVENT_CIPROVIDER",
    default=DEFAULT_CI_PROVIDER,
    show_default=True,
    help="[env.BUILDEVENT_CIPROVIDER] the CI provider label added to every event",
)
@click.option(
    "--failure-response",
    envvar="BUILDEVENT_FAILURE_RESPONSE",
    type=click.Choice([policy.value for policy in FailureResponse]),
    default=FailureResponse.ACKNOWLEDGE.value,
    show_default=True,
    help="[env.BUILDEVENT_FAILURE_RESPONSE] HTTP status for webhooks that could not be "
    "processed: 'acknowledge' answers 200, 'reject' answers 4xx",
)
@click.option("--host", envvar="HOST", default=DEFAULT_HOST, show_default=True, help="[env.HOST] bind address")
@click.option("--port", envvar="PORT", type=int, default=DEFAULT_PORT, show_default=True, help="[env.PORT] bind port")
@click.option(
    "--log-level",
    envvar="LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="INFO",
    show_default=True,
    help="[env.LOG_LEVEL] log level",
)
def cli(
    apikey: str,
    dataset: str,
    apihost: str,
    filename: str | None,
    provider: str,
    failure_response: str,
    host: str,
    port: int,
    log_level: str,
) -> None:
    try:
        extra_fields = load_extra_fields(filename)
    except ConfigError as e:
        raise click.BadParameter(str(e), param_hint="'--filename'") from e

    settings = Settings(
        api_key=apikey,
        dataset=dataset,
        api_host=apihost,
        ci_provider=provider,
        extra_fields=extra_fields,
        failure_response=FailureResponse(failure_response),
        host=host,
        port=port,
        log_level=log_level.upper(),
    )
    serve(settings)


def serve(settings: Settings) -> None:
    """Run the HTTP server until interrupted."""
    setup_logging(settings.log_level)
    app = create_fastapi_app(settings)

    click.echo(f"Starting server on http://{settings.host}:{settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


def main() -> None:
    """Console entry point."""
    load_dotenv()
    cli()
