import json
import pytest
from wordpass.errors import DictionaryFileError, InvalidArgument
from wordpass.storage.json_store import JsonStorage
from wordpass.words.bank import Dictionary
from wordpass.words.defaults import DEFAULT_WORDS_PATH, load_default_words, load_words_file
from wordpass.words.models import WordRecord

def test_save_and_restore_keeps_custom_statistics(tmp_path):
    storage = JsonStorage(str(tmp_path / "dicts"))
    original = Dictionary.from_words(["river", "stone"])
    original.set_dictionary(list(original.get_dictionary()) + [
        WordRecord(text="legacy", length=99, unique_characters=1)
    ])

    path = storage.save_dictionary("custom", original.get_dictionary())
    assert path == tmp_path / "dicts" / "custom.json"

    restored = Dictionary()
    restored.set_dictionary(storage.load_dictionary("custom"))
    assert restored.get_dictionary() == original.get_dictionary()
    assert restored.get_max_word_length() == 99

def test_saved_file_uses_export_keys(tmp_path):
    storage = JsonStorage(str(tmp_path))
    storage.save_dictionary("small", [WordRecord.from_text("test")])
    data = json.loads((tmp_path / "small.json").read_text())
    assert data == [{"word": "test", "length": 4, "uniqueCharacters": 3}]

def test_list_dictionaries(tmp_path):
    storage = JsonStorage(str(tmp_path / "missing"))
    assert storage.list_dictionaries() == []

    storage.save_dictionary("zeta", [])
    storage.save_dictionary("alpha", [])
    assert storage.list_dictionaries() == ["alpha", "zeta"]

def test_load_unknown_dictionary(tmp_path):
    with pytest.raises(DictionaryFileError):
        JsonStorage(str(tmp_path)).load_dictionary("nothing")

@pytest.mark.parametrize("name", ["", "../escape", "with space", "a/b"])
def test_rejects_bad_names(tmp_path, name):
    with pytest.raises(InvalidArgument):
        JsonStorage(str(tmp_path)).save_dictionary(name, [])

def test_load_words_file_accepts_strings_and_records(tmp_path):
    path = tmp_path / "mixed.json"
    path.write_text(json.dumps(["test", {"word": "odd", "length": 7, "uniqueCharacters": 2}]))
    assert load_words_file(path) == [
        WordRecord(text="test", length=4, unique_characters=3),
        WordRecord(text="odd", length=7, unique_characters=2),
    ]

@pytest.mark.parametrize("content", ["{not json", '{"word": "test"}', '["ok", ""]', '[{"word": "x"}]', "[3]"])
def test_load_words_file_rejects_bad_content(tmp_path, content):
    path = tmp_path / "bad.json"
    path.write_text(content)
    with pytest.raises(DictionaryFileError):
        load_words_file(path)

def test_load_words_file_missing(tmp_path):
    with pytest.raises(DictionaryFileError):
        load_words_file(tmp_path / "absent.json")

def test_bundled_word_list():
    words = load_default_words()
    assert DEFAULT_WORDS_PATH.exists()
    assert len(words) > 300
    for word in words:
        assert word.text.isalpha() and word.text.islower()
        assert word.length == len(word.text)
        assert word.unique_characters == len(set(word.text))

def test_load_words_file_on_directory(tmp_path):
    with pytest.raises(DictionaryFileError, match="Cannot read"):
        load_words_file(tmp_path)

def test_load_words_file_not_utf8(tmp_path):
    path = tmp_path / "latin.json"
    path.write_bytes(b'["caf\xe9"]')
    with pytest.raises(DictionaryFileError, match="not UTF-8"):
        load_words_file(path)
