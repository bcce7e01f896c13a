"""
Rendering of usage reports as HTML pages and JSON documents.

Output tree below the output directory:

    index.html                                   formats
    <format>/index.html                          years
    <format>/<year>/index.html                   months
    <format>/<year>/<month>/index.{html,json}    month usage
    <format>/<year>/<month>/<species>.{html,json}
    <format>/<year>/<month>/<day>/...            same as month, per day
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from usage_stats.statistics.model import AXES, Stats
from usage_stats.statistics.sorting import SpeciesEntry
from usage_stats.windows import Window

logger = logging.getLogger(__name__)

AXIS_TITLES = {
    'partner': 'Teammates',
    'against': 'Opponents',
    'item': 'Items',
    'ability': 'Abilities',
    'nature': 'Natures',
    'move': 'Moves',
}


def percent(value: int, total: int) -> str:
    if not total:
        return "0.00%"
    return f"{100.0 * value / total:.2f}%"


RESERVED_PAGE_NAMES = ('', 'index')


def page_name(species_id: str) -> str:
    """
    File stem of a species page.

    Species ids never contain '-', so prefixed names cannot clash with a
    real species or with the window index.
    """
    if species_id in RESERVED_PAGE_NAMES:
        return f"species-{species_id}"
    return species_id


def _template_env() -> Environment:
    templates_path = Path(__file__).resolve().parent / "templates"
    env = Environment(
        loader=FileSystemLoader(str(templates_path)),
        autoescape=select_autoescape(enabled_extensions=("html", "xml", "j2")),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters['percent'] = percent
    env.filters['page_name'] = page_name
    return env


class ReportRenderer:
    """
    Writes report artifacts for windows and index levels.

    Attributes:
        output_directory (Path): Root of the output tree.
        output_types (List[str]): Any of 'html', 'json'.
    """

    def __init__(self, output_directory: Path, output_types: Sequence[str] = ('html',)) -> None:
        self.output_directory = Path(output_directory)
        self.output_types = list(output_types)
        self.env = _template_env()

    @property
    def create_html(self) -> bool:
        return 'html' in self.output_types

    @property
    def create_json(self) -> bool:
        return 'json' in self.output_types

    def _write(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)

    def _render(self, template_name: str, **context: Any) -> str:
        return self.env.get_template(template_name).render(axes=AXES, axis_titles=AXIS_TITLES, **context)

    def render_window(self, window: Window, stats: Stats, entries: List[SpeciesEntry], days: Optional[Iterable[str]] = None) -> Path:
        """
        Write the species pages and index of a day or month window.

        Args:
            window: The day or month window.
            stats: Aggregated statistics of the window.
            entries: Sorted, zero-filtered species of the window.
            days: Present day labels, listed on a month index.

        Returns:
            Path: Directory the window was written to.
        """
        directory = self.output_directory.joinpath(*window.path_parts)
        directory.mkdir(parents=True, exist_ok=True)

        for entry in entries:
            if self.create_html:
                self._write(directory / f"{page_name(entry.name)}.html", self._render(
                    'species.html.j2',
                    entry=entry,
                    total_teams=stats.total_teams,
                    title=window.species_title(entry.name),
                ))
            if self.create_json:
                self._write(directory / f"{page_name(entry.name)}.json", json.dumps(entry.to_dict()))

        if self.create_html:
            template_name = 'day_index.html.j2' if window.is_day else 'month_index.html.j2'
            self._write(directory / 'index.html', self._render(
                template_name,
                window=window,
                total_teams=stats.total_teams,
                entries=entries,
                days=list(days or []),
                title=window.title,
            ))
        if self.create_json:
            self._write(directory / 'index.json', json.dumps(stats.to_dict()))

        logger.debug(f"Rendered {len(entries)} species for {window.title}")
        return directory

    def render_year(self, format: str, year: str, months: Sequence[str]) -> None:
        if self.create_html:
            self._write(self.output_directory / format / year / 'index.html', self._render(
                'year_index.html.j2',
                format=format,
                year=year,
                months=list(months),
                title=f"{format} {year} Usage Stats",
            ))

    def render_format(self, format: str, years: Sequence[str]) -> None:
        if self.create_html:
            self._write(self.output_directory / format / 'index.html', self._render(
                'format_index.html.j2',
                format=format,
                years=list(years),
                title=f"{format} Usage Stats",
            ))

    def render_root(self, formats: Sequence[str]) -> None:
        if self.create_html:
            self._write(self.output_directory / 'index.html', self._render(
                'root_index.html.j2',
                formats=list(formats),
                title="Usage Stats",
            ))
