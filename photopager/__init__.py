"""photopager: a self-invalidating page cache and prefetching pagination
controller for browsing a remote photo feed."""

__version__ = "0.1.0"
