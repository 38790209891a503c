"""EU Cosmetics Regulation provider (curated, snapshot only)."""

from typing import Sequence

import httpx

from adapters.sources.base import SourceProvider
from adapters.sources.snapshots import eurlex
from domain.enums import FetchStatus, SourceId
from domain.values import ProviderResult, SubstanceEntry


class EurLexProvider(SourceProvider):
    source_id = SourceId.EUR_LEX

    async def fetch(self, client: httpx.AsyncClient) -> ProviderResult:
        return self.snapshot_result(FetchStatus.CURATED)

    def snapshot(self) -> Sequence[SubstanceEntry]:
        return [
            SubstanceEntry(
                name=row["name"],
                cas_number=row["cas_number"],
                reason=row["reason"],
                regulation=row["regulation"],
                reference_url=f"{eurlex.CELEX_BASE}{row['celex']}",
                source_id=self.source_id,
            )
            for row in eurlex.ROWS
        ]
