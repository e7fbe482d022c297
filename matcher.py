import logging
import random

logger = logging.getLogger(__name__)


class CatalogMatcher:
    """Maps model labels onto catalog records. Never touches the network."""

    def __init__(self, rng=None):
        self.rng = rng or random.Random()

    def _require(self, catalog):
        if not catalog:
            raise ValueError("breed catalog is empty")

    def match(self, candidate, catalog):
        """Exact, case-sensitive lookup. Returns None when nothing matches."""
        for breed in catalog:
            if breed["name"] == candidate:
                return breed
        return None

    def resolve(self, candidate, catalog):
        """Return the record named `candidate`, or a uniformly random one."""
        self._require(catalog)
        breed = self.match(candidate, catalog)
        if breed is not None:
            return breed
        logger.info("label %r not in catalog, substituting a random breed", candidate)
        return self.rng.choice(catalog)

    def fallback(self, catalog, count=3):
        """Up to `count` distinct records in random order."""
        self._require(catalog)
        return self.rng.sample(list(catalog), min(count, len(catalog)))

    def companions(self, breed, catalog, count=2):
        others = [b for b in catalog if b["name"] != breed["name"]]
        return self.rng.sample(others, min(count, len(others)))
