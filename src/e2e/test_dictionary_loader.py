from pathlib import Path
import random
import pytest

from acroname import config as CFG
from acroname.engine import Engine
from acroname.errors import MissingDictionaryResourceError
from acroname.loader import (
    HunspellDictionary, StaticDictionary, WordfreqDictionary,
    coerce_provider, default_dictionary_path, default_provider,
)


def _seed(tmp: Path, text: str, name: str = "words.dic") -> Path:
    p = tmp / name
    p.write_text(text, encoding="utf-8")
    return p


@pytest.mark.e2e
def test_hunspell_flags_and_count_line(tmp_path: Path):
    p = _seed(tmp_path, "4\nCat/MS\nabbey/S po:noun\n3rd/p\nZurich/M\n")
    assert HunspellDictionary(p).load() == {"cat", "abbey", "zurich"}


@pytest.mark.e2e
def test_plain_word_list(tmp_path: Path):
    p = _seed(tmp_path, "apple\n\nBanana\n  cherry  \n", name="words.txt")
    assert HunspellDictionary(p).load() == {"apple", "banana", "cherry"}


@pytest.mark.e2e
def test_missing_file(tmp_path: Path):
    with pytest.raises(MissingDictionaryResourceError) as ei:
        HunspellDictionary(tmp_path / "nope.dic").load()
    assert isinstance(ei.value, FileNotFoundError)


@pytest.mark.e2e
def test_static_dictionary_normalizes():
    assert StaticDictionary(["CAT", " dog ", "", "  "]).load() == {"cat", "dog"}


@pytest.mark.e2e
def test_env_variable_wins(tmp_path: Path, monkeypatch):
    p = _seed(tmp_path, "1\ncat/S\n")
    monkeypatch.setenv(CFG.DICTIONARY_ENV, str(p))
    assert default_dictionary_path() == p
    assert Engine().acronym("cat", rng=random.Random(0), timeout=5) == "CAT: CAT"


@pytest.mark.e2e
def test_env_variable_must_exist(tmp_path: Path, monkeypatch):
    monkeypatch.setenv(CFG.DICTIONARY_ENV, str(tmp_path / "missing.dic"))
    with pytest.raises(MissingDictionaryResourceError):
        default_dictionary_path()
    with pytest.raises(MissingDictionaryResourceError):
        Engine().acronym("cat")


@pytest.mark.e2e
def test_wordfreq_fallback_is_large(monkeypatch):
    monkeypatch.delenv(CFG.DICTIONARY_ENV, raising=False)
    monkeypatch.setattr(CFG, "SYSTEM_DICTIONARY_PATHS", ())
    assert default_dictionary_path() is None
    provider = default_provider()
    assert isinstance(provider, WordfreqDictionary)
    words = provider.load()
    assert len(words) > 10_000
    assert {"cat", "dog", "house", "water"} <= words
    assert all(w == w.lower() and w[0].isalpha() for w in words)


@pytest.mark.e2e
def test_default_engine_finds_common_acronym(monkeypatch):
    monkeypatch.delenv(CFG.DICTIONARY_ENV, raising=False)
    monkeypatch.setattr(CFG, "SYSTEM_DICTIONARY_PATHS", ())
    out = Engine().acronym("Cold Air Transport", rng=random.Random(0), timeout=30)
    assert out, "expected a candidate from the wordfreq dictionary"
    assert out.split(": ")[1].lower() == "cold air transport"


@pytest.mark.e2e
def test_system_hunspell_beats_wordfreq(tmp_path: Path, monkeypatch):
    p = _seed(tmp_path, "1\ncat/S\n")
    monkeypatch.delenv(CFG.DICTIONARY_ENV, raising=False)
    monkeypatch.setattr(CFG, "SYSTEM_DICTIONARY_PATHS", (tmp_path / "absent.dic", p))
    provider = default_provider()
    assert isinstance(provider, HunspellDictionary)
    assert provider.load() == {"cat"}


@pytest.mark.e2e
def test_coerce_provider(tmp_path: Path):
    p = _seed(tmp_path, "cat\n")
    assert isinstance(coerce_provider(["cat"]), StaticDictionary)
    assert isinstance(coerce_provider({"cat"}), StaticDictionary)
    assert isinstance(coerce_provider(str(p)), HunspellDictionary)
    assert isinstance(coerce_provider(p), HunspellDictionary)
    static = StaticDictionary(["cat"])
    assert coerce_provider(static) is static
