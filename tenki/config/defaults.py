"""Named tenki.jp point forecast locations."""

DEFAULT_LOCATIONS: dict[str, str] = {
    "tsukuba": "3/11/4020/8220",
    "tokyo": "3/16/4410/13101",
}


def resolve_location(name_or_key: str) -> str:
    """Map a known location name to its key; anything else is a raw key."""
    return DEFAULT_LOCATIONS.get(name_or_key.strip().lower(), name_or_key)
