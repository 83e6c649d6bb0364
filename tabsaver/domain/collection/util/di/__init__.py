from tabsaver.domain.collection.util.di.provider import CollectionProvider

__all__ = ["CollectionProvider"]
