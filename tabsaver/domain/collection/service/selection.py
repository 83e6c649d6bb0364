"""Favorites and default-selection rules for collection pickers."""

from collections.abc import Iterable

from tabsaver.domain.collection.model.value import Collection, CollectionChoice


def _dedupe(ids: Iterable[str]) -> list[str]:
    seen: dict[str, None] = {}
    for raw in ids:
        value = str(raw).strip()
        if value:
            seen.setdefault(value, None)
    return list(seen)


def add_favorite(ids: Iterable[str], collection_id: str) -> list[str]:
    return _dedupe([*ids, collection_id])


def remove_favorite(ids: Iterable[str], collection_id: str) -> list[str]:
    target = collection_id.strip()
    return [i for i in _dedupe(ids) if i != target]


def choose_collection(
    collections: list[Collection],
    selected_id: str | None,
    favorite_ids: Iterable[str],
) -> CollectionChoice:
    """Decide which collections to offer and which one to preselect.

    Favorites present in the listing are offered in listing order; with none,
    the whole listing is offered. The stored selection wins if offered,
    then the first favorite, then the first collection.
    """
    favorites_set = set(_dedupe(favorite_ids))
    favorites = [c for c in collections if c.id in favorites_set]
    options = favorites or collections

    if selected_id and any(c.id == selected_id for c in options):
        chosen: str | None = selected_id
    elif favorites:
        chosen = favorites[0].id
    elif collections:
        chosen = collections[0].id
    else:
        chosen = None

    return CollectionChoice(
        options=options,
        selected_id=chosen,
        using_fallback=not favorites and bool(collections),
    )
