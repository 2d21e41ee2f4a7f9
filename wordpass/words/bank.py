import logging
from collections import Counter
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union
from wordpass.errors import EmptyDictionary, NoMatchingWord
from wordpass.randomness import RandomSource, SecureRandom
from wordpass.words.models import WordRecord

logger = logging.getLogger(__name__)

RecordLike = Union[WordRecord, Mapping]

class Dictionary:
    """
    Manages the word records and provides queries and random selection.

    Records keep insertion order and duplicates are allowed. Raw strings are
    always turned into records through WordRecord.from_text; records handed to
    set_dictionary are stored as they are.
    """

    def __init__(self, records: Optional[Iterable[RecordLike]] = None, random_source: Optional[RandomSource] = None):
        self.random_source = random_source or SecureRandom()
        self._records: List[WordRecord] = []
        if records is not None:
            self.set_dictionary(records)

    @classmethod
    def from_words(cls, words: Iterable[str], random_source: Optional[RandomSource] = None):
        dictionary = cls(random_source=random_source)
        dictionary.set_words(words)
        return dictionary

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[WordRecord]:
        return iter(tuple(self._records))

    def __contains__(self, word: str) -> bool:
        return self.is_present(word)

    def get_dictionary(self) -> Tuple[WordRecord, ...]:
        return tuple(self._records)

    def set_dictionary(self, records: Iterable[RecordLike]):
        """
        Replaces the collection with the given records. Length and unique
        character counts are taken as given, which lets an exported
        dictionary be restored exactly.
        """
        self._records = [
            r if isinstance(r, WordRecord) else WordRecord.model_validate(r)
            for r in records
        ]
        logger.debug("Dictionary replaced with %d records", len(self._records))

    def set_words(self, words: Iterable[str]):
        self._records = [WordRecord.from_text(w) for w in words]
        logger.debug("Dictionary replaced with %d words", len(self._records))

    def add_word(self, word: str):
        self._records.append(WordRecord.from_text(word))

    def add_words(self, words: Iterable[str]):
        # Build first so a bad word leaves the collection untouched
        new_records = [WordRecord.from_text(w) for w in words]
        self._records.extend(new_records)

    def remove_word(self, word: str):
        self._records = [r for r in self._records if r.text != word]

    def remove_words(self, words: Iterable[str]):
        unwanted = set(words)
        self._records = [r for r in self._records if r.text not in unwanted]

    def is_present(self, word: str) -> bool:
        return any(r.text == word for r in self._records)

    def get_min_word_length(self) -> int:
        self._require_words()
        return min(r.length for r in self._records)

    def get_max_word_length(self) -> int:
        self._require_words()
        return max(r.length for r in self._records)

    def lengths(self) -> Dict[int, int]:
        """
        Number of records per word length, shortest first.
        """
        counts = Counter(r.length for r in self._records)
        return dict(sorted(counts.items()))

    def get_random_word(self, length: int) -> WordRecord:
        self._require_words()
        matches = [r for r in self._records if r.length == length]
        if not matches:
            raise NoMatchingWord(length)
        return matches[self.random_source.random_int(len(matches))]

    def random_word(self) -> WordRecord:
        """
        Picks any record, uniformly over the whole collection.
        """
        self._require_words()
        return self._records[self.random_source.random_int(len(self._records))]

    def _require_words(self):
        if not self._records:
            raise EmptyDictionary()
