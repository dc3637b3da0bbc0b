"""Rich-based completeness tables."""

from __future__ import annotations

from typing import ClassVar

from rich.console import Console
from rich.table import Table

from journeypilot.catalog.sections import SectionTable
from journeypilot.contracts.completeness import OverallCompleteness


class RichCompletenessReport:
    """Render one profile's completeness as a Rich table.

    Percentages are colour-banded so nearly-complete sections stand out::

        report = RichCompletenessReport()
        report.render("Business profile", result, BUSINESS_SECTIONS)
    """

    _BANDS: ClassVar[tuple[tuple[int, str], ...]] = (
        (80, "green"),
        (50, "yellow"),
        (0, "red"),
    )

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console()

    @classmethod
    def style_for(cls, percentage: int) -> str:
        for floor, style in cls._BANDS:
            if percentage >= floor:
                return style
        return "red"

    def build_table(self, title: str, result: OverallCompleteness, table: SectionTable) -> Table:
        rich_table = Table(title=f"{title}: {result.overall}%", title_justify="left")
        rich_table.add_column("Section")
        rich_table.add_column("Score", justify="right")
        rich_table.add_column("Approved", justify="right")
        rich_table.add_column("Pending", justify="right")
        rich_table.add_column("Types", justify="right")

        for meta in table:
            section = result.sections.get(meta.key)
            if section is None:
                continue
            style = self.style_for(section.percentage)
            rich_table.add_row(
                meta.title,
                f"[{style}]{section.percentage}%[/{style}]",
                f"{section.approved_count}/{section.required_count}",
                str(section.pending_count),
                f"{section.covered_types_count}/{section.total_types_count}",
            )
        return rich_table

    def render(self, title: str, result: OverallCompleteness, table: SectionTable) -> None:
        self._console.print(self.build_table(title, result, table))
