"""ANSM (French medicines and health products agency) cosmetics alerts provider."""

from typing import Sequence

from bs4 import BeautifulSoup

from adapters.sources.base import LiveSourceProvider
from adapters.sources.snapshots import ansm
from domain.enums import SourceId
from domain.values import SubstanceEntry

RESULT_SELECTORS = "article, .search-result, .result-item, h2 a, h3 a"
KEYWORDS = ("cosmétique", "cosmetique", "rappel", "alerte")
MIN_TEXT_LENGTH = 10
MAX_NAME_LENGTH = 120


class AnsmProvider(LiveSourceProvider):
    source_id = SourceId.ANSM
    accept_language = "fr-FR,fr;q=0.9,en;q=0.8"

    def parse(self, html: str) -> list[SubstanceEntry]:
        """Best effort: result cards mentioning cosmetics, recalls or alerts"""
        soup = BeautifulSoup(html, "html.parser")
        entries = []
        for element in soup.select(RESULT_SELECTORS):
            text = element.get_text(" ", strip=True)
            if len(text) < MIN_TEXT_LENGTH:
                continue
            lowered = text.lower()
            if not any(keyword in lowered for keyword in KEYWORDS):
                continue
            entries.append(
                SubstanceEntry(
                    name=text[:MAX_NAME_LENGTH],
                    reason="ANSM cosmetics safety alert",
                    regulation="ANSM décision de police sanitaire",
                    reference_url=self.url,
                    source_id=self.source_id,
                )
            )
        return entries

    def snapshot(self) -> Sequence[SubstanceEntry]:
        return [
            SubstanceEntry(
                name=row["name"],
                cas_number=row["cas_number"],
                reason=row["reason"],
                regulation=row["regulation"],
                reference_url=(
                    f"{ansm.ANSM_BASE}/rechercher?category=cosmetiques&query={row['query']}"
                ),
                source_id=self.source_id,
            )
            for row in ansm.ROWS
        ]
