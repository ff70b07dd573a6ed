"""Concrete adapters implementing the interfaces in ``cachestore.interfaces``."""
