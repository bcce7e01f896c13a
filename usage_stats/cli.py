"""Command line interface for generating usage reports from match logs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, List, Optional

import typer

from usage_stats.record_source import RecordSource
from usage_stats.report.config import RunConfig
from usage_stats.report.generator import ReportGenerator
from usage_stats.report.renderer import ReportRenderer, percent
from usage_stats.statistics.pipeline import StatisticsConfig, UsagePipeline
from usage_stats.statistics.sorting import sorted_species
from usage_stats.windows import Window

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Team usage statistics from recorded match logs.",
)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_run_config(config: Optional[Path], **overrides) -> RunConfig:
    """Run configuration from an optional YAML file, with command line values on top."""
    try:
        base = RunConfig.from_yaml(config) if config is not None else RunConfig()
        run_config = base.merged(**overrides)
    except FileNotFoundError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    missing = run_config.missing_fields()
    if missing:
        options = ", ".join(f"--{name.replace('_', '-')}" for name in missing)
        raise typer.BadParameter(f"Missing settings (set them on the command line or in --config): {options}")
    return run_config


@app.command()
def generate(
    directory: Annotated[
        Optional[Path],
        typer.Option("--directory", help="Root directory of the match logs."),
    ] = None,
    format: Annotated[
        Optional[List[str]],
        typer.Option("--format", help="Format to process. Repeat for several."),
    ] = None,
    year: Annotated[
        Optional[List[str]],
        typer.Option("--year", help="Year to process. Repeat for several."),
    ] = None,
    month: Annotated[
        Optional[List[str]],
        typer.Option("--month", help="Month to process (01-12). Repeat for several."),
    ] = None,
    output_type: Annotated[
        Optional[List[str]],
        typer.Option("--output-type", help="Output kind: html or json. Repeat for both."),
    ] = None,
    output_directory: Annotated[
        Optional[Path],
        typer.Option("--output-directory", help="Root directory of the generated reports."),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", help="YAML file with 'run' and 'statistics' sections."),
    ] = None,
    workers: Annotated[
        Optional[int],
        typer.Option("--workers", help="Threads used to aggregate the windows of a month."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging."),
    ] = False,
) -> None:
    """Aggregate match logs and write the report hierarchy."""
    _setup_logging(verbose)
    run_config = load_run_config(
        config,
        directory=directory,
        formats=format,
        years=year,
        months=month,
        output_types=output_type,
        output_directory=output_directory,
        workers=workers,
    )

    generator = ReportGenerator(
        record_source=RecordSource(run_config.directory),
        renderer=ReportRenderer(run_config.output_directory, run_config.output_types),
        run_config=run_config,
        statistics_config=StatisticsConfig(config_file=config),
    )
    root = generator.run()

    if not root.present:
        typer.echo("no match records found; nothing written")
        return
    for format_node in root.present_children():
        years = ", ".join(
            f"{year_node.label}({'/'.join(year_node.present_labels())})"
            for year_node in format_node.present_children()
        )
        typer.echo(f"{format_node.label}: {years}")
    typer.echo(f"reports written to {run_config.output_directory}")


@app.command()
def top(
    directory: Annotated[
        Path,
        typer.Argument(help="Root directory of the match logs."),
    ],
    format: Annotated[
        str,
        typer.Argument(help="Format name."),
    ],
    year: Annotated[
        str,
        typer.Argument(help="Year label."),
    ],
    month: Annotated[
        str,
        typer.Argument(help="Month label (01-12)."),
    ],
    day: Annotated[
        Optional[str],
        typer.Option("--day", help="Restrict to one day (01-31)."),
    ] = None,
    limit: Annotated[
        int,
        typer.Option("--limit", help="Number of species to show."),
    ] = 20,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", help="YAML file with a 'statistics' section."),
    ] = None,
) -> None:
    """Print the most used species of one month or day window."""
    if limit <= 0:
        raise typer.BadParameter("--limit must be greater than 0")
    window = Window(format=format, year=year, month=month.zfill(2), day=day.zfill(2) if day else None)

    pipeline = UsagePipeline(config=StatisticsConfig(config_file=config))
    stats = pipeline.run(RecordSource(directory).fetch_window(window))
    entries = sorted_species(stats)
    if not entries:
        typer.echo(f"{window.title}: no match records")
        return

    typer.echo(f"{window.title}: {stats.total_teams} teams")
    for rank, entry in enumerate(entries[:limit], start=1):
        typer.echo(
            f"{rank:>3} {entry.name:<24} usage={entry.usage} ({percent(entry.usage, stats.total_teams)}) "
            f"win={percent(entry.wins, entry.usage)}"
        )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
