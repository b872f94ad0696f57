"""Core page-data access layer.

- **observable** -- ``ObservableValue`` replay-latest cell and its
  ``Subscription`` handle.
- **page_cache** -- ``PageCache`` of self-invalidating page streams.
- **pagination_controller** -- ``PaginationController``: fetch, reuse,
  refetch and prefetch decisions for one feed feature.
"""

from photopager.services.observable import ObservableValue, Subscription
from photopager.services.page_cache import API_CACHE_LIFETIME, PageCache, PageCacheEntry
from photopager.services.pagination_controller import DEFAULT_FEATURE, PaginationController

__all__ = [
    "API_CACHE_LIFETIME",
    "DEFAULT_FEATURE",
    "ObservableValue",
    "PageCache",
    "PageCacheEntry",
    "PaginationController",
    "Subscription",
]
