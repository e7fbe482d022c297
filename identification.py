"""
End-to-end breed identification.

    encode -> credential -> request -> match

Any failure before matching falls back to three shuffled catalog breeds.
A label that is not in the catalog is replaced by one random breed, followed
by two companions. The caller always gets a ranked list, never an error.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from errors import IdentificationError, UnknownLabelError

logger = logging.getLogger(__name__)

RESOLVED = "resolved"
FALLBACK = "fallback"

FALLBACK_SIZE = 3
COMPANION_COUNT = 2


@dataclass
class IdentificationOutcome:
    state: str
    breeds: List[dict] = field(default_factory=list)
    label: Optional[str] = None
    matched: bool = False
    error: Optional[IdentificationError] = None

    @property
    def top(self):
        return self.breeds[0] if self.breeds else None

    def to_dict(self):
        return {
            "state": self.state,
            "matched": self.matched,
            "label": self.label,
            "error": type(self.error).__name__ if self.error else None,
            "breeds": [
                # display-only placeholder, not derived from the model
                dict(breed, match_confidence=90 - rank * 10)
                for rank, breed in enumerate(self.breeds)
            ],
        }


class IdentificationWorkflow:

    def __init__(self, client, matcher, catalog):
        if not catalog:
            raise ValueError("breed catalog is empty")
        self.client = client
        self.matcher = matcher
        self.catalog = list(catalog)

    def run(self, image_bytes):
        result = self.client.identify(image_bytes)
        if not result.ok:
            logger.warning("identification fell back to random breeds: %s",
                           type(result.error).__name__)
            return IdentificationOutcome(
                state=FALLBACK,
                breeds=self.matcher.fallback(self.catalog, FALLBACK_SIZE),
                error=result.error,
            )

        label = result.breed_name
        breed = self.matcher.match(label, self.catalog)
        error = None
        if breed is None:
            error = UnknownLabelError(label)
            breed = self.matcher.resolve(label, self.catalog)

        companions = self.matcher.companions(breed, self.catalog, COMPANION_COUNT)
        return IdentificationOutcome(
            state=RESOLVED,
            breeds=[breed] + companions,
            label=label,
            matched=error is None,
            error=error,
        )
