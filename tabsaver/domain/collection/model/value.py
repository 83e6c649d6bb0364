from datetime import UTC, datetime, timedelta

from pydantic import field_validator

from tabsaver.domain.shared.model.value import ValueObject

UNTITLED_COLLECTION = "(Untitled database)"

FINGERPRINT_LENGTH = 8


def fingerprint(credential: str) -> str:
    """Weak credential identity for cache scoping: the last 8 characters.

    The full secret is never written to the cache.
    """
    return (credential or "").strip()[-FINGERPRINT_LENGTH:]


class Collection(ValueObject):
    """A database-like container of records, as listed by discovery."""

    id: str
    title: str
    url: str | None = None


class CollectionCacheEntry(ValueObject):
    """The single cached discovery result, replaced wholesale on refresh."""

    credential_fingerprint: str
    fetched_at: datetime
    collections: list[Collection]

    @field_validator("fetched_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    def is_fresh(self, credential: str, now: datetime, ttl: timedelta) -> bool:
        """Fresh iff younger than ``ttl`` and written under the same fingerprint."""
        return (
            now - self.fetched_at < ttl
            and self.credential_fingerprint == fingerprint(credential)
        )


class CollectionListing(ValueObject):
    collections: list[Collection]
    cached: bool


class CollectionChoice(ValueObject):
    """What a picker should offer and which entry it should preselect."""

    options: list[Collection]
    selected_id: str | None
    using_fallback: bool
