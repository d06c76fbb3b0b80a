from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="unitlite", help="Run time-bounded unit tests")


def _resolve_config(config: str | None):
    from unitlite.config import RunConfig, load_config

    if config is None:
        return RunConfig()
    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)
    try:
        return load_config(config_path)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def _load(module: str, default_time_limit_ms: int | None):
    from unitlite.loader import load_registry

    try:
        return load_registry(module, default_time_limit_ms=default_time_limit_ms)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def run(
    module: str = typer.Argument(help="Test module (dotted name or .py path, optional :registry)"),
    tokens: list[str] | None = typer.Argument(
        None, help="Run only tests whose name contains (or whose acronym is) a token"
    ),
    config: str | None = typer.Option(None, "--config", "-c", help="Path to run YAML config"),
    format: str | None = typer.Option(None, "--format", "-f", help="Output format: tap, gtest, plain"),
    junit: str | None = typer.Option(None, help="Also write JUnit XML to this path"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    log_file: str | None = typer.Option(None, help="Write the debug log to this file"),
    ignore_debugger: bool = typer.Option(
        False, "--ignore-debugger", help="Keep time limits even when a debugger is attached"
    ),
):
    """Run the selected tests and print a report."""
    from unitlite.reporting import get_reporter
    from unitlite.reporting.junit import write_junit
    from unitlite.runner import Runner
    from unitlite.verbose import setup_logger

    run_config = _resolve_config(config)
    if format is not None:
        run_config.format = format
    if junit is not None:
        run_config.junit = junit
    if ignore_debugger:
        run_config.ignore_debugger = True

    logger = setup_logger(
        Path(log_file) if log_file else None, verbose=verbose, logger_name="unitlite"
    )

    try:
        reporter = get_reporter(
            run_config.format,
            diagnostics_before_results=run_config.diagnostics_before_results,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    registry = _load(module, run_config.default_time_limit_ms)
    logger.debug(f"Loaded {len(registry)} test(s) from {module}")

    runner = Runner(
        registry,
        reporter=reporter,
        ignore_debugger=run_config.ignore_debugger,
        default_time_limit_ms=run_config.default_time_limit_ms,
    )
    summary = runner.run(tokens or [])

    if run_config.junit:
        junit_path = write_junit(Path(run_config.junit), summary)
        typer.echo(f"JUnit XML: {junit_path}")

    if not summary.all_passed:
        raise typer.Exit(1)


@app.command("list")
def list_tests(
    module: str = typer.Argument(help="Test module (dotted name or .py path, optional :registry)"),
    tokens: list[str] | None = typer.Argument(None, help="Selection tokens"),
    config: str | None = typer.Option(None, "--config", "-c", help="Path to run YAML config"),
):
    """Print the tests a run with these tokens would execute."""
    run_config = _resolve_config(config)
    registry = _load(module, run_config.default_time_limit_ms)
    default_ms = run_config.default_time_limit_ms
    if default_ms is None:
        default_ms = registry.default_time_limit_ms
    selection = registry.select(tokens or [])
    for warning in selection.warnings:
        typer.echo(f"Warning: {warning}", err=True)
    for name in selection.names:
        limit = registry[name].limit(default_ms)
        bound = f"{limit}ms" if limit > 0 else "unbounded"
        typer.echo(f"{name}\t{bound}")


@app.command()
def report(
    junit_xml: str = typer.Argument(help="Path to a junit.xml written by `unitlite run`"),
    open_report: bool = typer.Option(
        False, "--open", help="Open report.html in browser after generating"
    ),
):
    """Render an HTML report next to a JUnit XML file."""
    from unitlite.reporting.junit import generate_report

    junit_path = Path(junit_xml)
    if not junit_path.is_file():
        typer.echo(f"Error: not a JUnit XML file: {junit_xml}", err=True)
        raise typer.Exit(1)

    report_path = generate_report(junit_path)
    typer.echo(f"Report generated: {report_path}")

    if open_report:
        import webbrowser

        webbrowser.open(report_path.resolve().as_uri())
