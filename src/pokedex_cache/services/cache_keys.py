"""Cache key derivation for getPokemon responses.

Keys look like `pokemon:<variant>:<form-encoded params>`. Parameters are
sorted by name, so the key does not depend on mapping order. List values
are encoded as repeated parameters (`names=a&names=b`).
"""

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import urlencode

DEFAULT_PREFIX = "pokemon"


def build_cache_key(variant: str, params: Mapping[str, Any], prefix: str = DEFAULT_PREFIX) -> str:
    """Build a deterministic cache key.

    Args:
        variant: Request shape tag ("names", "name", "all", "type")
        params: Normalized query parameters
        prefix: Key namespace

    Returns:
        The cache key
    """
    pairs = sorted(
        (k, [str(item) for item in v] if isinstance(v, (list, tuple)) else str(v))
        for k, v in params.items()
    )
    query = urlencode(pairs, doseq=True)
    return f"{prefix}:{variant}:{query}"


def names_cache_key(
    names: Iterable[str], page: int, limit: int, prefix: str = DEFAULT_PREFIX
) -> str:
    """Key for a multi-name request; permutations and duplicates collide."""
    return build_cache_key(
        "names",
        {"names": normalize_names(names), "page": page, "limit": limit},
        prefix,
    )


def name_cache_key(name: str, prefix: str = DEFAULT_PREFIX) -> str:
    """Key for a single-name request.

    The name is lower-cased here while the store lookup stays case-sensitive,
    so "Pikachu" and "pikachu" share one entry.
    """
    return build_cache_key("name", {"name": name.lower()}, prefix)


def listing_cache_key(
    page: int, limit: int, type: str | None = None, prefix: str = DEFAULT_PREFIX
) -> str:
    """Key for the unrestricted or type-filtered listing."""
    if type:
        return build_cache_key("type", {"type": type, "page": page, "limit": limit}, prefix)
    return build_cache_key("all", {"page": page, "limit": limit}, prefix)


def normalize_names(names: Iterable[str]) -> list[str]:
    """Sort and de-duplicate a name set."""
    return sorted(set(names))
