class WordpassError(Exception):
    """
    Base class for every error raised by wordpass.
    """


class InvalidArgument(WordpassError, ValueError):
    pass


class EmptyDictionary(WordpassError, LookupError):
    def __init__(self, message: str = "Dictionary is empty"):
        super().__init__(message)


class NoMatchingWord(WordpassError, LookupError):
    def __init__(self, length: int):
        super().__init__(f"No word of length {length} in dictionary")
        self.length = length


class DictionaryFileError(WordpassError):
    """
    A dictionary file could not be read or does not hold a list of words.
    """
