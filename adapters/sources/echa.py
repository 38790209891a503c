"""
ECHA SVHC Candidate List provider.

The live table paginates at 50 rows while the full list has ~250 entries, so
a single-page fetch misses long-standing substances (Lead, DEHP). Live data
is only trusted above ``min_live_results`` rows.
"""

from typing import Sequence

from bs4 import BeautifulSoup

from adapters.sources.base import LiveSourceProvider
from adapters.sources.snapshots import echa_svhc
from domain.enums import SourceId
from domain.values import SubstanceEntry


def _cell_text(cell) -> str:
    return cell.get_text(" ", strip=True)


class EchaSvhcProvider(LiveSourceProvider):
    source_id = SourceId.ECHA_SVHC

    def is_plausible(self, entries: Sequence[SubstanceEntry]) -> bool:
        return len(entries) > self.min_live_results

    def parse(self, html: str) -> list[SubstanceEntry]:
        """Rows of the candidate list table: name | EC | CAS | date | reason"""
        soup = BeautifulSoup(html, "html.parser")
        entries = []
        for row in soup.select("table tbody tr"):
            cells = row.find_all("td")
            if len(cells) < 3:
                continue
            name = _cell_text(cells[0])
            if not name:
                continue
            reason = _cell_text(cells[4]) if len(cells) > 4 else ""
            entries.append(
                SubstanceEntry(
                    name=name,
                    cas_number=_cell_text(cells[2]) or None,
                    reason=reason or None,
                    regulation=echa_svhc.REGULATION,
                    # Detail links in the table point at retired portlet URLs
                    reference_url=None,
                    source_id=self.source_id,
                )
            )
        return entries

    def snapshot(self) -> Sequence[SubstanceEntry]:
        return [
            SubstanceEntry(
                name=name,
                cas_number=cas_number,
                reason=reason,
                regulation=echa_svhc.REGULATION,
                source_id=self.source_id,
            )
            for name, cas_number, reason in echa_svhc.ROWS
        ]
