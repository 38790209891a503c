"""
Regulatory source providers.
One provider per watch-list; ``build_providers`` wires them from settings.
"""

from adapters.sources.base import SourceProvider, LiveSourceProvider
from adapters.sources.echa import EchaSvhcProvider
from adapters.sources.eurlex import EurLexProvider
from adapters.sources.ansm import AnsmProvider
from domain.enums import SourceId


def build_providers(settings) -> list[SourceProvider]:
    """Providers for ``settings.enabled_sources``, in configured order"""
    factories = {
        SourceId.ECHA_SVHC: lambda: EchaSvhcProvider(
            settings.echa_svhc_url,
            settings.source_timeout_seconds,
            settings.echa_min_live_results,
        ),
        SourceId.EUR_LEX: EurLexProvider,
        SourceId.ANSM: lambda: AnsmProvider(
            settings.ansm_search_url,
            settings.source_timeout_seconds,
            settings.ansm_min_live_results,
        ),
    }
    return [factories[source_id]() for source_id in settings.enabled_sources]


__all__ = [
    "SourceProvider",
    "LiveSourceProvider",
    "EchaSvhcProvider",
    "EurLexProvider",
    "AnsmProvider",
    "build_providers",
]
