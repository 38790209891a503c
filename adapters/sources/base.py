"""
Source provider contract.

A provider never raises for fetch problems: it returns its static snapshot
tagged DEGRADED and the reason in ``detail``.
"""

from abc import ABC, abstractmethod
import logging
from typing import Optional, Sequence

import httpx

from domain.enums import FetchStatus, SourceId
from domain.values import ProviderResult, SubstanceEntry

BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Cache-Control": "no-cache",
}


class SourceProvider(ABC):
    """One regulatory watch-list"""

    source_id: SourceId

    def __init__(self):
        self.logger = logging.getLogger(f"reglement.sources.{self.source_id.value.lower()}")

    @abstractmethod
    def snapshot(self) -> Sequence[SubstanceEntry]:
        """Static entries used when live data is unavailable"""

    @abstractmethod
    async def fetch(self, client: httpx.AsyncClient) -> ProviderResult:
        """Entries for this run"""

    def snapshot_result(
        self, status: FetchStatus = FetchStatus.DEGRADED, detail: Optional[str] = None
    ) -> ProviderResult:
        entries = tuple(self.snapshot())
        self.logger.info(
            "Using static snapshot (%d substances) status=%s", len(entries), status.value
        )
        return ProviderResult(
            source_id=self.source_id, entries=entries, status=status, detail=detail
        )


class LiveSourceProvider(SourceProvider):
    """
    Provider that scrapes a page and trusts the result only above a size floor.

    Subclasses implement ``parse``; the fallback rules live here.
    """

    accept_language = "en-US,en;q=0.9"

    def __init__(self, url: str, timeout: float, min_live_results: int):
        super().__init__()
        self.url = url
        self.timeout = timeout
        self.min_live_results = min_live_results

    @abstractmethod
    def parse(self, html: str) -> list[SubstanceEntry]:
        """Extract entries from the fetched page"""

    def is_plausible(self, entries: Sequence[SubstanceEntry]) -> bool:
        return len(entries) >= self.min_live_results

    async def fetch_html(self, client: httpx.AsyncClient) -> str:
        headers = dict(BROWSER_HEADERS)
        headers["Accept-Language"] = self.accept_language
        response = await client.get(self.url, headers=headers, timeout=self.timeout)
        response.raise_for_status()
        return response.text

    async def fetch(self, client: httpx.AsyncClient) -> ProviderResult:
        try:
            self.logger.info("Attempting live fetch from %s", self.url)
            html = await self.fetch_html(client)
            entries = self.parse(html)
        except httpx.HTTPError as exc:
            detail = f"live fetch failed: {exc.__class__.__name__}: {exc}"
            self.logger.warning("%s, using static fallback", detail)
            return self.snapshot_result(FetchStatus.DEGRADED, detail)
        except ValueError as exc:
            detail = f"could not parse live page: {exc}"
            self.logger.warning("%s, using static fallback", detail)
            return self.snapshot_result(FetchStatus.DEGRADED, detail)

        if not self.is_plausible(entries):
            detail = (
                f"live fetch returned only {len(entries)} substances "
                f"(threshold {self.min_live_results})"
            )
            self.logger.warning("%s, using static fallback", detail)
            return self.snapshot_result(FetchStatus.DEGRADED, detail)

        self.logger.info("Live fetch OK, %d substances extracted", len(entries))
        return ProviderResult(
            source_id=self.source_id, entries=tuple(entries), status=FetchStatus.FRESH
        )
