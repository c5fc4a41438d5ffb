from .config import CONTACT_FIELDS, RECENT_LIMIT


def sort_by_name(items):
    # sorted() is stable, so names equal ignoring case keep scan order
    return sorted(items, key=lambda c: c["name"].upper())


def most_recent(items, limit=RECENT_LIMIT):
    """Newest first by ``created_at``; untimestamped items go last in scan order."""
    stamped = [c for c in items if c.get("created_at") is not None]
    unstamped = [c for c in items if c.get("created_at") is None]
    stamped = sorted(stamped, key=lambda c: c["created_at"], reverse=True)
    return (stamped + unstamped)[:limit]


def contact_view(item):
    return {field: item.get(field) for field in CONTACT_FIELDS}
