"""Site Typer app factory."""

import typer

from doclinks.api.site.cmd_href import cmd_href
from doclinks.api.site.cmd_url import cmd_url
from doclinks.cli._handle_stage_result import handle_stage_result


def site() -> typer.Typer:
    """Create and configure the site Typer app."""
    app = typer.Typer(
        name="site",
        help="Site build link transforms",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="href")
    def href_cmd(
        href: str = typer.Argument(..., help="Link target as written in markdown"),
        base: str | None = typer.Option(None, "--base", "-b", help="Deployment base path (default: from config or site URL)"),
    ) -> None:
        """Show the href the site build serves for a markdown link."""
        handle_stage_result(cmd_href, result_printer=lambda output: [output["rewritten"]])(href, base=base)

    @app.command(name="url")
    def url_cmd() -> None:
        """Show the resolved site URL."""
        handle_stage_result(cmd_url, result_printer=lambda output: [output["url"]])()

    return app
