"""Tests for the site-queries command-line interface."""

from pathlib import Path

from typer.testing import CliRunner

from site_queries.cli import app

runner = CliRunner()


def _write_content(root: Path) -> None:
    content = root / "content"
    covers = content / "assets" / "cover"
    covers.mkdir(parents=True)
    (covers / "sea.jpg").write_bytes(b"")
    (covers / "laptop.png").write_bytes(b"")
    (content / "snippets.yaml").write_text(
        "- slug: /css/s/center\n"
        "  type: snippet\n"
        "  title: Center content\n"
        "  tags: [layout, visual]\n"
        "  language: css\n"
        "  cover: sea\n"
        "- slug: /articles/s/flexbox\n"
        "  type: story\n"
        "  tags: [visual, layout]\n"
        "  cover: sea\n",
        encoding="utf-8",
    )
    (content / "redirects.yaml").write_text(
        "- from: /css/s/centering\n  to: /css/s/center\n"
        "- from: /css/s/center-it\n  to: /css/s/centering\n",
        encoding="utf-8",
    )


def _invoke(root: Path, *args: str):
    return runner.invoke(
        app, ["--content-root", str(root), "--log-level", "WARNING", *args]
    )


def test_alternatives_command(tmp_path: Path):
    _write_content(tmp_path)

    result = _invoke(tmp_path, "alternatives", "/css/s/center")

    assert result.exit_code == 0, result.output
    assert result.output.split() == ["/css/s/center", "/css/s/centering", "/css/s/center-it"]


def test_match_command_primary(tmp_path: Path):
    _write_content(tmp_path)

    any_tag = _invoke(tmp_path, "match", "--tag", "layout")
    primary = _invoke(tmp_path, "match", "--tag", "layout", "--primary")

    assert any_tag.exit_code == 0, any_tag.output
    assert "/articles/s/flexbox" in any_tag.output
    assert "2 matching records" in any_tag.output
    assert "/css/s/center" in primary.output
    assert "/articles/s/flexbox" not in primary.output


def test_covers_and_types_commands(tmp_path: Path):
    _write_content(tmp_path)

    covers = _invoke(tmp_path, "covers")
    types = _invoke(tmp_path, "types")

    assert covers.exit_code == 0, covers.output
    assert "sea" in covers.output
    assert "laptop" in covers.output
    assert types.exit_code == 0, types.output
    assert "snippet" in types.output
    assert "story" in types.output


def test_alternatives_stdout_holds_only_slugs(tmp_path: Path):
    _write_content(tmp_path)

    result = runner.invoke(app, ["--content-root", str(tmp_path), "alternatives", "/css/s/center"])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "/css/s/center",
        "/css/s/centering",
        "/css/s/center-it",
    ]


def test_cli_leaves_content_root_untouched(tmp_path: Path):
    _write_content(tmp_path)
    before = sorted(p.relative_to(tmp_path) for p in tmp_path.rglob("*"))

    result = runner.invoke(app, ["--content-root", str(tmp_path), "types"])

    assert result.exit_code == 0, result.output
    assert sorted(p.relative_to(tmp_path) for p in tmp_path.rglob("*")) == before


def test_log_file_option_writes_jsonl(tmp_path: Path):
    _write_content(tmp_path)
    log_path = tmp_path.parent / f"{tmp_path.name}-run.jsonl"

    result = runner.invoke(
        app,
        ["--content-root", str(tmp_path), "--log-file", str(log_path), "covers"],
    )

    assert result.exit_code == 0, result.output
    assert "Query layer ready" in log_path.read_text(encoding="utf-8")
