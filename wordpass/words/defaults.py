import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Tuple, Union
from pydantic import ValidationError
from wordpass.errors import DictionaryFileError, InvalidArgument
from wordpass.words.models import WordRecord

logger = logging.getLogger(__name__)

DEFAULT_WORDS_PATH = Path(__file__).parent / "data" / "words.json"

def load_words_file(path: Union[str, Path]) -> List[WordRecord]:
    """
    Reads a JSON array of words. Items may be plain strings, which get their
    statistics derived, or exported record objects, which are kept verbatim.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise DictionaryFileError(f"Dictionary file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise DictionaryFileError(f"Invalid JSON in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DictionaryFileError(f"{path} is not UTF-8 text: {e}") from e
    except OSError as e:
        raise DictionaryFileError(f"Cannot read dictionary file {path}: {e}") from e

    if not isinstance(data, list):
        raise DictionaryFileError(f"{path} must contain a JSON array of words")

    records = []
    for i, item in enumerate(data):
        try:
            if isinstance(item, str):
                records.append(WordRecord.from_text(item))
            else:
                records.append(WordRecord.model_validate(item))
        except (InvalidArgument, ValidationError) as e:
            raise DictionaryFileError(f"Bad entry #{i} in {path}: {e}") from e

    logger.debug("Loaded %d words from %s", len(records), path)
    return records

@lru_cache(maxsize=1)
def load_default_words() -> Tuple[WordRecord, ...]:
    return tuple(load_words_file(DEFAULT_WORDS_PATH))
