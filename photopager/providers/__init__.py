"""Concrete adapters for the interfaces in ``photopager.interfaces``."""
