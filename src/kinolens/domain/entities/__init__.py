from .cache import CacheEntry, CacheKey, CacheLookup
from .catalog import (
    Artwork,
    Episode,
    ExternalIds,
    Image,
    ItemDetail,
    Person,
    PersonKind,
    Rating,
    SearchItem,
    SearchPage,
    SeasonDetail,
    SeasonSummary,
    Video,
    Votes,
)
from .lookup import LookupKind, LookupResult, LookupStatus

__all__ = [
    "Artwork",
    "CacheEntry",
    "CacheKey",
    "CacheLookup",
    "Episode",
    "ExternalIds",
    "Image",
    "ItemDetail",
    "LookupKind",
    "LookupResult",
    "LookupStatus",
    "Person",
    "PersonKind",
    "Rating",
    "SearchItem",
    "SearchPage",
    "SeasonDetail",
    "SeasonSummary",
    "Video",
    "Votes",
]
