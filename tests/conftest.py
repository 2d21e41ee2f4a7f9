import pytest
from wordpass.randomness import RandomSource

class ScriptedRandom(RandomSource):
    """
    Replays a fixed list of draws and records every bound it was asked for.
    """

    def __init__(self, draws=()):
        self.draws = list(draws)
        self.calls = []

    def _draw(self, maximum: int) -> int:
        self.calls.append(maximum)
        if not self.draws:
            raise AssertionError(f"Unexpected random draw (max={maximum})")
        value = self.draws.pop(0)
        assert 0 <= value < maximum
        return value

@pytest.fixture
def scripted():
    return ScriptedRandom
