"""List the collections the credential can write to."""

import logfire

from tabsaver.config import Config
from tabsaver.domain.collection.model.value import Collection
from tabsaver.domain.collection.service.discovery import CollectionService
from tabsaver.domain.shared.command import Command, CommandHandler, Result


class ListCollections(Command):
    force_refresh: bool = False


class CollectionsListed(Result):
    collections: list[Collection]
    cached: bool


class ListCollectionsHandler(CommandHandler[ListCollections, CollectionsListed]):
    config: Config
    collection_service: CollectionService

    async def run(self, cmd: ListCollections) -> CollectionsListed:
        with logfire.span("ListCollections", force_refresh=cmd.force_refresh):
            listing = await self.collection_service.list_collections(
                self.config.notion.api_key, force_refresh=cmd.force_refresh
            )
            logfire.info(
                "Collections listed",
                count=len(listing.collections),
                cached=listing.cached,
            )
            return CollectionsListed(collections=listing.collections, cached=listing.cached)
