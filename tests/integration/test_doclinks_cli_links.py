"""Integration tests for the links CLI."""

import json

import pytest
import yaml

from doclinks.cli import main
from tests.conftest import write_doc

pytestmark = pytest.mark.links


def test_check_clean_tree(docs, capsys):
    write_doc(docs, "index.md", "[Setup](/setup/)\n")
    write_doc(docs, "setup.md", "# Setup\n")

    exit_code = main(["links", "check", "--root", str(docs)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "All links valid!" in captured.out
    assert "Checking documentation links" in captured.err


def test_check_broken_anchor_fails(docs, capsys):
    write_doc(docs, "how-to/setup.md", "# Setup\n\n## Install\n")
    write_doc(docs, "index.md", "[setup](/how-to/setup/#prereqs)\n")

    exit_code = main(["links", "check", "--root", str(docs)])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "  [MANUAL] /how-to/setup/#prereqs" in out
    assert 'Anchor "#prereqs" not found' in out


def test_check_then_write_then_clean(docs, capsys):
    index = write_doc(docs, "index.md", "See [Old](/old-page/).\n")
    write_doc(docs, "guides/old-page.md", "# Old page\n")

    assert main(["links", "check", "--root", str(docs)]) == 1
    out = capsys.readouterr().out
    assert "  [FIX] /old-page/" in out
    assert "     -> /guides/old-page/" in out
    assert "Run with --write to auto-fix 1 issue(s)" in out

    assert main(["links", "check", "--write", "--root", str(docs)]) == 0
    assert "Mode: WRITE MODE" in capsys.readouterr().out
    assert index.read_text(encoding="utf-8") == "See [Old](/guides/old-page/).\n"

    assert main(["links", "check", "--root", str(docs)]) == 0
    assert "All links valid!" in capsys.readouterr().out


def test_check_ambiguous_link_is_not_fixed(docs, capsys):
    index = write_doc(docs, "index.md", "[P](/page/)\n")
    write_doc(docs, "a/page.md", "# A\n")
    write_doc(docs, "b/page.md", "# B\n")

    exit_code = main(["links", "check", "-w", "-r", str(docs)])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "  [REVIEW] /page/" in out
    assert "       - a/page.md" in out
    assert index.read_text(encoding="utf-8") == "[P](/page/)\n"


def test_check_json_display(docs, capsys):
    write_doc(docs, "index.md", "[Gone](/gone/)\n")

    exit_code = main(["--display", "json", "links", "check", "--root", str(docs)])

    output = json.loads(capsys.readouterr().out)
    assert exit_code == 1
    assert output["total_issues"] == 1
    assert output["issues"][0]["status"] == "manual-check"


def test_check_yaml_display(docs, capsys):
    write_doc(docs, "index.md", "# Home\n")

    exit_code = main(["-d", "yaml", "links", "check", "--root", str(docs)])

    output = yaml.safe_load(capsys.readouterr().out)
    assert exit_code == 0
    assert output["files_scanned"] == 1


def test_check_missing_root(tmp_path, capsys):
    exit_code = main(["links", "check", "--root", str(tmp_path / "missing")])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Link check failed" in captured.err
    assert "Documentation root not found" in captured.out


def test_normalize_dry_run_and_write(docs, capsys):
    write_doc(docs, "setup.md", "# Setup\n")
    page = write_doc(docs, "guides/index.md", "[Setup](../setup.md)\n")

    assert main(["links", "normalize", "--root", str(docs)]) == 0
    out = capsys.readouterr().out
    assert "    -> /docs/setup.md" in out
    assert page.read_text(encoding="utf-8") == "[Setup](../setup.md)\n"

    assert main(["links", "normalize", "--write", "--root", str(docs)]) == 0
    assert page.read_text(encoding="utf-8") == "[Setup](/docs/setup.md)\n"


def test_links_without_subcommand_shows_help(capsys):
    assert main(["links"]) == 0
    assert "check" in capsys.readouterr().err
