"""Create the main Typer CLI app."""

import typer

from doclinks.cli.config import config
from doclinks.cli.links import links
from doclinks.cli.site import site

DISPLAY_FORMATS = ("text", "json", "yaml")


def _configure_logging() -> None:
    from doclinks.api.config.DocLinksConfig import DocLinksConfig
    from doclinks.api.log import configure_logging

    try:
        level = DocLinksConfig.load().log.level
    except ValueError:
        # Commands report the broken config themselves
        level = "INFO"
    configure_logging(level=level)


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Documentation link validator and rewriter",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(links(), name="links")
    app.add_typer(site(), name="site")
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("text", "--display", "-d", help="Output format: text, json or yaml"),
    ) -> None:
        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be one of {', '.join(DISPLAY_FORMATS)}, got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display
        _configure_logging()

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
