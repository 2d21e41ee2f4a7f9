import logging
from typing import Iterable, List, Optional, Union
from wordpass.errors import EmptyDictionary, InvalidArgument
from wordpass.generator.substitution import swap_symbols
from wordpass.randomness import RandomSource, SecureRandom
from wordpass.words.bank import Dictionary, RecordLike
from wordpass.words.defaults import load_default_words

logger = logging.getLogger(__name__)

DEFAULT_WORD_COUNT = 3

class PassphraseGenerator:
    """
    Builds passphrases from random whole words of the dictionary it owns.

    The generator and its dictionary share one RandomSource, so word draws,
    substitution gates and symbol choices all come from the same place.
    """

    def __init__(
        self,
        dictionary: Union[Dictionary, Iterable[RecordLike], None] = None,
        random_source: Optional[RandomSource] = None
    ):
        if isinstance(dictionary, Dictionary):
            # The generator keeps its own copy; the caller's store is left untouched
            self.random_source = random_source or dictionary.random_source
            self.dictionary = Dictionary(dictionary.get_dictionary(), random_source=self.random_source)
        else:
            self.random_source = random_source or SecureRandom()
            if dictionary is None:
                dictionary = load_default_words()
            self.dictionary = Dictionary(dictionary, random_source=self.random_source)

    def generate(
        self,
        word_count: int = DEFAULT_WORD_COUNT,
        separator: Optional[str] = None,
        random_symbol_swap: bool = False
    ) -> str:
        # Validate before touching the dictionary or drawing anything
        if isinstance(word_count, bool) or not isinstance(word_count, int) or word_count < 1:
            raise InvalidArgument("Word count must be greater than 0")
        if not len(self.dictionary):
            raise EmptyDictionary("Cannot generate a passphrase from an empty dictionary")

        logger.debug(
            "Generating passphrase: %d words, separator=%r, symbol swap=%s",
            word_count, separator, random_symbol_swap
        )

        pieces = []
        for i in range(word_count):
            word = self.dictionary.random_word().text
            if separator and i < word_count - 1:
                word += separator
            pieces.append(word)
        passphrase = "".join(pieces)

        if random_symbol_swap:
            return swap_symbols(passphrase, self.random_source)
        return passphrase

    def generate_many(
        self,
        count: int,
        word_count: int = DEFAULT_WORD_COUNT,
        separator: Optional[str] = None,
        random_symbol_swap: bool = False
    ) -> List[str]:
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise InvalidArgument("Passphrase count must be greater than 0")
        return [
            self.generate(word_count, separator, random_symbol_swap)
            for _ in range(count)
        ]
