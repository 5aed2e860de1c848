"""Command line entry point."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from .config import Settings, load_settings
from .core.exporter import EXPORT_FORMATS
from .core.outcome import Outcome
from .logging_config import setup_logger
from .session import Session

app = typer.Typer(help="Generate landing pages from a prompt and export them.", no_args_is_help=True)

_state: dict = {}


def _settings() -> Settings:
    return _state.get("settings") or load_settings()


def _report(outcome: Outcome) -> None:
    if not outcome.ok:
        typer.echo(outcome.message, err=True)
        raise typer.Exit(code=1)
    typer.echo(outcome.message)


def _formats(fmt: str) -> List[str]:
    if fmt == "both":
        return list(EXPORT_FORMATS)
    if fmt not in EXPORT_FORMATS:
        typer.echo(f"Unknown format {fmt!r}; use html, react or both.", err=True)
        raise typer.Exit(code=2)
    return [fmt]


def _disable(session: Session, names: List[str]) -> None:
    if session.page is None:
        return
    wanted = {name.lower() for name in names}
    for section in list(session.page.sections):
        if section.enabled and (section.id.lower() in wanted or section.name.lower() in wanted):
            _report(session.toggle_section(section.id))


def _finish(session: Session, out: Path, fmt: str, copy: bool) -> None:
    for name in _formats(fmt):
        _report(session.export(name, out))
    if copy:
        _report(session.copy_html())


@app.callback()
def configure(
    settings_file: Optional[Path] = typer.Option(  # noqa: B008
        None, "--settings", help="Path to a JSON settings file."
    ),
    strict: bool = typer.Option(False, "--strict", help="Fail on invalid section edits."),
) -> None:
    settings = load_settings(settings_file)
    if strict:
        settings.strict = True
    setup_logger(level=settings.log_level)
    _state["settings"] = settings


@app.command()
def generate(
    prompt: str = typer.Argument(..., help="Describe the landing page to build."),
    out: Path = typer.Option(Path("."), "--out", "-o", help="Output directory."),  # noqa: B008
    fmt: str = typer.Option("both", "--format", "-f", help="html, react or both."),
    disable: List[str] = typer.Option(  # noqa: B008
        [], "--disable", "-d", help="Section name or id to leave out of the export."
    ),
    copy: bool = typer.Option(False, "--copy", help="Also copy the HTML to the clipboard."),
) -> None:
    """Generate a page with the configured service and export it."""
    session = Session(_settings())
    _report(session.generate(prompt))
    _disable(session, disable)
    _finish(session, out, fmt, copy)


@app.command("export")
def export_response(
    response: Path = typer.Argument(..., help="JSON file holding a generator response."),  # noqa: B008
    out: Path = typer.Option(Path("."), "--out", "-o", help="Output directory."),  # noqa: B008
    fmt: str = typer.Option("both", "--format", "-f", help="html, react or both."),
    disable: List[str] = typer.Option(  # noqa: B008
        [], "--disable", "-d", help="Section name or id to leave out of the export."
    ),
    copy: bool = typer.Option(False, "--copy", help="Also copy the HTML to the clipboard."),
) -> None:
    """Compile a saved generator response and export it."""
    try:
        data = json.loads(response.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        typer.echo(f"Could not read {response}: {exc}", err=True)
        raise typer.Exit(code=1)
    if not isinstance(data, dict):
        typer.echo(f"{response} does not hold a JSON object.", err=True)
        raise typer.Exit(code=1)
    session = Session(_settings())
    _report(session.load_response(data))
    _disable(session, disable)
    _finish(session, out, fmt, copy)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
