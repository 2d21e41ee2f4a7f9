import os
from typing import Optional
from pydantic import BaseModel, Field

ENV_PREFIX = "WORDPASS_"

class GeneratorSettings(BaseModel):
    word_count: int = Field(default=3, ge=1)
    separator: str = "-"
    symbol_swap: bool = False
    dictionary_file: Optional[str] = None   # None means the bundled word list
    storage_dir: str = "dictionaries"

    @classmethod
    def from_env(cls) -> "GeneratorSettings":
        """
        Builds settings from WORDPASS_* environment variables. Unset
        variables keep their defaults; pydantic validates the rest.
        """
        values = {}
        for field_name in cls.model_fields:
            raw = os.getenv(ENV_PREFIX + field_name.upper())
            if raw is not None:
                values[field_name] = raw
        return cls.model_validate(values)
