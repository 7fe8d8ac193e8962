import logging
import sys
from pathlib import Path

import click
from click_default_group import DefaultGroup

from ..config import ConfigError, ServerConfig
from ..init import init_env, init_logging
from .app import create_app
from .exceptions import ServerError

logger = logging.getLogger(__name__)


def resolve_config(
    host: str | None, port: int | None, assets_dir: Path | None
) -> ServerConfig:
    """Environment first, then whatever was given on the command line."""
    try:
        return ServerConfig.from_env().with_overrides(
            host=host, port=port, assets_dir=assets_dir
        )
    except ConfigError as e:
        logger.error(str(e))
        sys.exit(1)


host_option = click.option(
    "--host", default=None, help="Host to bind the server to. [default: 0.0.0.0]"
)
port_option = click.option(
    "--port",
    type=int,
    default=None,
    help="Port to run the server on. Overrides PORT. [default: 3000]",
)
assets_dir_option = click.option(
    "--assets-dir",
    type=click.Path(path_type=Path),
    default=None,
    help="Directory with the built web app. [default: ./build/web]",
)


@click.group(cls=DefaultGroup, default="serve", default_if_no_args=True)
def main():
    """PetCare web app server commands."""
    init_env()


@main.command("serve")
@click.option("--debug", is_flag=True, help="Debug mode")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@host_option
@port_option
@assets_dir_option
def serve(
    debug: bool,
    verbose: bool,
    host: str | None,
    port: int | None,
    assets_dir: Path | None,
):
    """
    Serves the built web app.

    Any path that isn't a file in the assets directory gets index.html,
    so client-side routes work on reload.
    """
    init_logging(verbose)
    config = resolve_config(host, port, assets_dir)

    try:
        app = create_app(config)
    except ServerError as e:
        logger.error(str(e))
        logger.error("Build the web app first, or point --assets-dir at the build")
        sys.exit(1)

    logger.info(f"PetCare Web App is running on port {config.port}")
    logger.info(f"Visit: http://localhost:{config.port}")

    try:
        app.run(debug=debug, host=config.host, port=config.port)
    except OSError as e:
        logger.error(f"Could not listen on {config.host}:{config.port}: {e}")
        sys.exit(1)


@main.command("config")
@host_option
@port_option
@assets_dir_option
def show_config(host: str | None, port: int | None, assets_dir: Path | None):
    """Display the resolved server configuration."""
    init_logging(False)
    config = resolve_config(host, port, assets_dir)

    click.echo(f"Host:              {config.host}")
    click.echo(f"Port:              {config.port}")
    click.echo(f"Assets directory:  {config.assets_dir}")
    click.echo(f"Fallback document: {config.fallback_document}")


if __name__ == "__main__":
    main()
