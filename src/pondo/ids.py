"""Task id generation.

Ids are ``T`` followed by three characters from ``A-Z0-9``. Generators sit
behind the single-method :class:`IdGenerator` interface so the store and the
operations never care how an id was drawn.
"""

import logging
import random
import string
from abc import ABC, abstractmethod
from typing import Collection, Optional

from .errors import IdGenerationError

logger = logging.getLogger(__name__)

ID_PREFIX = "T"
ID_LENGTH = 3
ID_ALPHABET = string.ascii_uppercase + string.digits


class IdGenerator(ABC):
    """Produces task ids."""

    @abstractmethod
    def generate(self, existing_ids: Collection[str] = ()) -> str:
        """Return a new task id.

        Args:
            existing_ids: Ids already present in the store. Implementations
                may ignore it.
        """


class RandomIdGenerator(IdGenerator):
    """Draws ids from a pseudo-random source with no uniqueness check."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate(self, existing_ids: Collection[str] = ()) -> str:
        suffix = "".join(self.rng.choice(ID_ALPHABET) for _ in range(ID_LENGTH))
        return ID_PREFIX + suffix


class UniqueIdGenerator(IdGenerator):
    """Redraws from another generator until the id is not already taken."""

    def __init__(self, base: Optional[IdGenerator] = None, max_attempts: int = 100):
        self.base = base or RandomIdGenerator()
        self.max_attempts = max_attempts

    def generate(self, existing_ids: Collection[str] = ()) -> str:
        taken = set(existing_ids)
        for attempt in range(1, self.max_attempts + 1):
            candidate = self.base.generate(taken)
            if candidate not in taken:
                return candidate
            logger.debug("Id %s already taken (attempt %d)", candidate, attempt)

        raise IdGenerationError(
            f"Could not generate an unused task ID after {self.max_attempts} attempts"
        )


ID_STRATEGIES = ("unique", "random")


def make_id_generator(strategy: str = "unique", rng: Optional[random.Random] = None) -> IdGenerator:
    """Build the id generator for an ``id_strategy`` setting."""
    if strategy == "random":
        return RandomIdGenerator(rng)
    if strategy == "unique":
        return UniqueIdGenerator(RandomIdGenerator(rng))
    raise ValueError(f"Unknown id strategy: {strategy!r} (expected one of {', '.join(ID_STRATEGIES)})")
