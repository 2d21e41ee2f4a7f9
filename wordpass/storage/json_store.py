import json
import logging
import re
from pathlib import Path
from typing import Iterable, List
from wordpass.errors import DictionaryFileError, InvalidArgument
from wordpass.words.defaults import load_words_file
from wordpass.words.models import WordRecord

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

class JsonStorage:
    """
    Saves and restores dictionaries as JSON files, one file per name.
    Records are written with their statistics so a restored dictionary is
    identical to the saved one.
    """

    def __init__(self, base_path: str = "dictionaries"):
        self.base_path = Path(base_path)

    def _path_for(self, name: str) -> Path:
        if not NAME_PATTERN.match(name):
            raise InvalidArgument(f"Invalid dictionary name: {name!r}")
        return self.base_path / f"{name}.json"

    def save_dictionary(self, name: str, records: Iterable[WordRecord]) -> Path:
        file_path = self._path_for(name)
        self.base_path.mkdir(parents=True, exist_ok=True)

        serializable = [r.model_dump(by_alias=True) for r in records]
        with open(file_path, 'w', encoding="utf-8") as f:
            json.dump(serializable, f, indent=2, ensure_ascii=False)

        logger.info("Saved %d words to %s", len(serializable), file_path)
        return file_path

    def load_dictionary(self, name: str) -> List[WordRecord]:
        file_path = self._path_for(name)
        if not file_path.exists():
            raise DictionaryFileError(f"No stored dictionary named {name!r} in {self.base_path}")
        return load_words_file(file_path)

    def list_dictionaries(self) -> List[str]:
        if not self.base_path.exists():
            return []
        return sorted(p.stem for p in self.base_path.glob("*.json"))
