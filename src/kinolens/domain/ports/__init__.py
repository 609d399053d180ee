from .catalog import CatalogClientPort
from .lookup_observer import LookupObserverPort
from .response_cache import ResponseCachePort

__all__ = [
    "CatalogClientPort",
    "LookupObserverPort",
    "ResponseCachePort",
]
