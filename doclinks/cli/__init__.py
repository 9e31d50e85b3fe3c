"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click

    from doclinks.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-V" in argv:
        from doclinks.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"doclinks {result.output.get('full_version', result.output.get('version', 'unknown'))}")
        return 0 if result.success else 1

    app = _create_app()
    try:
        exit_code = app(argv, prog_name="doclinks", standalone_mode=False)
    except click.exceptions.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        click.echo(f"Usage error: {e}", err=True)
        return 1
    except click.exceptions.Abort:
        return 130
    except Exception as e:
        click.echo(f"Unhandled error: {e}", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0
