"""Links Typer app factory."""

import typer

from doclinks.api.links.cmd_check import cmd_check
from doclinks.api.links.cmd_normalize import cmd_normalize
from doclinks.api.links.format_normalize_report import format_normalize_report
from doclinks.api.links.format_report import format_report
from doclinks.cli._handle_stage_result import handle_stage_result


def links() -> typer.Typer:
    """Create and configure the links Typer app."""
    app = typer.Typer(
        name="links",
        help="Documentation link operations",
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

    @app.command(name="check")
    def check_cmd(
        write: bool = typer.Option(False, "--write", "-w", help="Apply auto-fixable repairs in place"),
        root: str | None = typer.Option(None, "--root", "-r", help="Documentation root (default: configured docs_root)"),
    ) -> None:
        """Validate site-relative links and anchors; exit 1 if any issue remains."""
        handle_stage_result(cmd_check, result_printer=format_report)(root, write=write)

    @app.command(name="normalize")
    def normalize_cmd(
        write: bool = typer.Option(False, "--write", "-w", help="Write the rewritten files"),
        root: str | None = typer.Option(None, "--root", "-r", help="Documentation root (default: configured docs_root)"),
    ) -> None:
        """Rewrite links to repo-relative /docs/<path>.md form."""
        handle_stage_result(cmd_normalize, result_printer=format_normalize_report)(root, write=write)

    return app
