from pydantic import BaseModel, ConfigDict, Field
from wordpass.errors import InvalidArgument

class WordRecord(BaseModel):
    """
    A dictionary entry: the word plus statistics derived from it.

    Serialized as {"word", "length", "uniqueCharacters"} so exported
    dictionaries keep the shape of the bundled word lists.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str = Field(alias="word")
    length: int                                              # len(text)
    unique_characters: int = Field(alias="uniqueCharacters")  # len(set(text)), case-sensitive

    @classmethod
    def from_text(cls, text: str) -> "WordRecord":
        if not isinstance(text, str) or not text:
            raise InvalidArgument(f"Word must be a non-empty string, got {text!r}")
        return cls(text=text, length=len(text), unique_characters=len(set(text)))
