"""Abstract breach checker interface."""

from abc import ABC, abstractmethod
from shared.domain.models import BreachResult


class BreachChecker(ABC):
    """Anything that can answer "has this password been breached?".

    Implemented by the network client and by the in-memory mock.
    """

    @abstractmethod
    def check(self, password: str) -> BreachResult:
        """Check a plaintext password.

        Raises:
            BreachCheckError: If the lookup could not be completed
        """
        pass

    @abstractmethod
    def check_hash(self, hash_value: str) -> BreachResult:
        """Check a precomputed 40-character SHA-1 hex hash.

        Raises:
            HashFormatError: If hash_value is not 40 hex characters
            BreachCheckError: If the lookup could not be completed
        """
        pass
