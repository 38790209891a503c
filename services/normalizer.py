"""
Source aggregation.

Fans out to every configured provider concurrently and joins the results into
one flat, ordered entry list. A provider that raises or overruns its time
budget is replaced by its own static snapshot; one bad source never aborts
the others.
"""

import asyncio
from dataclasses import dataclass, field
import logging
from typing import Optional, Sequence

import httpx

from adapters.sources.base import SourceProvider
from domain.enums import FetchStatus
from domain.values import ProviderResult, SubstanceEntry

logger = logging.getLogger("reglement.normalizer")

# Headroom over the provider's own httpx timeout before the outer guard fires
TIMEOUT_GRACE_SECONDS = 5.0


@dataclass
class NormalizedEntries:
    entries: list[SubstanceEntry] = field(default_factory=list)
    results: list[ProviderResult] = field(default_factory=list)
    source_counts: dict[str, int] = field(default_factory=dict)
    degraded_sources: list[str] = field(default_factory=list)

    @property
    def source_statuses(self) -> dict[str, str]:
        """FRESH, DEGRADED or CURATED per source, in provider order"""
        return {r.source_id.value: r.status.value for r in self.results}


class Normalizer:
    def __init__(
        self,
        providers: Sequence[SourceProvider],
        timeout_seconds: float = 15.0,
        client: Optional[httpx.AsyncClient] = None,
        grace_seconds: float = TIMEOUT_GRACE_SECONDS,
    ):
        self.providers = list(providers)
        self.timeout_seconds = timeout_seconds
        self.grace_seconds = grace_seconds
        self._client = client

    @classmethod
    def from_settings(cls, settings, providers: Sequence[SourceProvider]) -> "Normalizer":
        return cls(providers, timeout_seconds=settings.source_timeout_seconds)

    async def _guarded_fetch(
        self, provider: SourceProvider, client: httpx.AsyncClient
    ) -> ProviderResult:
        try:
            return await asyncio.wait_for(
                provider.fetch(client),
                timeout=self.timeout_seconds + self.grace_seconds,
            )
        except asyncio.TimeoutError:
            detail = f"provider timed out after {self.timeout_seconds:.0f}s"
        except Exception as exc:
            detail = f"provider raised {exc.__class__.__name__}: {exc}"
            logger.exception("Source %s failed unexpectedly", provider.source_id.value)
        return provider.snapshot_result(FetchStatus.DEGRADED, detail)

    async def collect(self) -> NormalizedEntries:
        """Fetch all sources and flatten them in provider order"""
        if self._client is not None:
            results = await self._gather(self._client)
        else:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                results = await self._gather(client)

        normalized = NormalizedEntries(results=list(results))
        for result in results:
            source = result.source_id.value
            normalized.entries.extend(result.entries)
            normalized.source_counts[source] = len(result.entries)
            if result.degraded:
                normalized.degraded_sources.append(source)
                logger.warning("Source %s degraded: %s", source, result.detail)

        logger.info(
            "Collected %d entries (%s)",
            len(normalized.entries),
            ", ".join(f"{k}={v}" for k, v in normalized.source_counts.items()),
        )
        return normalized

    async def _gather(self, client: httpx.AsyncClient) -> list[ProviderResult]:
        return await asyncio.gather(
            *(self._guarded_fetch(provider, client) for provider in self.providers)
        )

