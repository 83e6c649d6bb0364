from tabsaver.config import AutoOpen


def open_url_for(
    preference: AutoOpen, record_url: str | None, collection_url: str | None
) -> str | None:
    """URL to open after a save, per the auto-open preference."""
    if preference == AutoOpen.PAGE:
        return record_url
    if preference == AutoOpen.DATABASE:
        return collection_url
    return None
