"""Process-wide wiring of the publish pipeline."""

from __future__ import annotations

from functools import lru_cache

from libindex_api.service.catalog_queries import CatalogQueries
from libindex_api.service.enrichment import EnrichmentFetcher
from libindex_api.service.index_writer import IndexWriter
from libindex_api.service.publish_process import PublishProcess
from libindex_api.service.user_state import UserStateResolver
from libindex_api.storage import ContentStore


class IndexServiceFacade:
    def __init__(self) -> None:
        self.store = ContentStore()
        self.enrichment = EnrichmentFetcher(self.store)
        self.writer = IndexWriter()
        self.publish = PublishProcess(
            store=self.store,
            writer=self.writer,
            enrichment=self.enrichment,
        )
        self.queries = CatalogQueries()
        self.user_states = UserStateResolver()


@lru_cache()
def get_index_services() -> IndexServiceFacade:
    return IndexServiceFacade()


__all__ = ["IndexServiceFacade", "get_index_services"]
