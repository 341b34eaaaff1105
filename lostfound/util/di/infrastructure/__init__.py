"""Infrastructure providers.

ProdPersistenceProvider is imported so it registers as a subclass of
PersistenceProvider before get_provider looks for implementations.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
