import secrets
from abc import ABC, abstractmethod
from wordpass.errors import InvalidArgument

class RandomSource(ABC):
    """
    Supplies uniformly distributed integers to the dictionary and generator.
    Every random decision in wordpass goes through random_int, so swapping
    the source (for example in tests) swaps all of them at once.
    """

    def random_int(self, maximum: int) -> int:
        """
        Returns an integer in [0, maximum).
        """
        if maximum < 1:
            raise InvalidArgument(f"Random bound must be at least 1, got {maximum}")
        return self._draw(maximum)

    @abstractmethod
    def _draw(self, maximum: int) -> int:
        pass

class SecureRandom(RandomSource):
    """
    Operating system CSPRNG via the secrets module.
    """

    def _draw(self, maximum: int) -> int:
        return secrets.randbelow(maximum)
