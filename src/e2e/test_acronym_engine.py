import itertools
import logging
import random
import threading
import pytest

from acroname import Engine, SearchTimeoutNotice, EmptyInputError, ResultRecord, acronym
from acroname.loader import StaticDictionary


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        t = self.now
        self.now += 1.0
        return t


class CountingProvider:
    """Dictionary provider that records how often it was asked to load."""
    def __init__(self, words):
        self.words = frozenset(words)
        self.loads = 0
        self._lock = threading.Lock()

    def load(self):
        with self._lock:
            self.loads += 1
        return self.words


@pytest.mark.e2e
def test_acronym_from_caller_dictionary():
    out = acronym("Cat", dictionary=["CAT"], rng=random.Random(0))
    assert out == "CAT: CAT"


@pytest.mark.e2e
def test_acronym_table_row():
    rec = acronym("the cold air tank", dictionary={"cat"}, acronym_length=3,
                  as_table=True, rng=random.Random(4), timeout=10)
    assert isinstance(rec, ResultRecord)
    assert rec.prefix == "CAT"
    assert rec.formatted == f"{rec.prefix}: {rec.suffix}"
    assert rec.original == "cold air tank"
    assert rec.suffix.lower() == "cold air tank"


@pytest.mark.e2e
def test_table_original_tracks_bag_of_words_sample():
    text = "c a t c a t"
    dictionary = {"".join(p) for p in itertools.product("cat", repeat=3)}
    for seed in range(10):
        rec = acronym(text, dictionary=dictionary, ignore_articles=False, bag_of_words=True,
                      bow_proportion=0.5, as_table=True, rng=random.Random(seed), timeout=10)
        retained = rec.original.split()
        assert len(retained) == 3
        assert rec.original == rec.suffix.lower()
        # retained words are a subsequence of the input
        it = iter(text.split())
        assert all(w in it for w in retained)


@pytest.mark.e2e
def test_timeout_returns_notice_and_logs(caplog):
    with caplog.at_level(logging.WARNING, logger="acroname.engine"):
        out = acronym("cat", dictionary=["dog"], timeout=3, clock=FakeClock())
    assert isinstance(out, SearchTimeoutNotice)
    assert not out
    assert out.timeout == 3
    assert "(3 seconds)" in out.message
    assert any("Unable to find viable acronym" in r.getMessage() for r in caplog.records)


@pytest.mark.e2e
def test_same_seed_same_acronym():
    words = {"cat", "cot", "art", "air", "sea", "ace", "car", "tar", "oat"}
    text = "Cold Air Transport Service"
    a = acronym(text, dictionary=words, rng=random.Random(7), timeout=10)
    b = acronym(text, dictionary=words, rng=random.Random(7), timeout=10)
    assert a == b
    assert a.split(": ")[0].lower() in words


@pytest.mark.e2e
def test_longer_acronyms():
    out = acronym("Open Access Knowledge Systems", dictionary=["oak", "oaks"],
                  acronym_length=4, rng=random.Random(3), timeout=10)
    assert out.startswith("OAKS: ")
    assert out.split(": ")[1].lower() == "open access knowledge systems"


@pytest.mark.e2e
def test_empty_input_raises():
    with pytest.raises(EmptyInputError):
        acronym("the", dictionary=["cat"])


@pytest.mark.e2e
@pytest.mark.parametrize("kwargs", [dict(acronym_length=9), dict(acronym_length=0), dict(timeout=0)])
def test_invalid_arguments(kwargs):
    with pytest.raises(ValueError):
        acronym("cat", dictionary=["cat"], **kwargs)


@pytest.mark.e2e
def test_engine_loads_dictionary_lazily_once():
    provider = CountingProvider({"cat"})
    eng = Engine(provider)
    assert not eng.loaded
    assert eng.initialism("the Quick brown Fox") == "QBF: Quick Brown Fox"
    assert not eng.loaded

    threads = [threading.Thread(target=eng.load) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert provider.loads == 1

    assert eng.acronym("cat", rng=random.Random(0)) == "CAT: CAT"
    assert eng.acronym("cat", rng=random.Random(1)) == "CAT: CAT"
    assert provider.loads == 1


@pytest.mark.e2e
def test_per_call_dictionary_overrides_engine_dictionary():
    eng = Engine(StaticDictionary(["dog"]))
    assert eng.acronym("cat", dictionary=["cat"], rng=random.Random(0)) == "CAT: CAT"
    assert not eng.loaded


@pytest.mark.e2e
def test_dictionary_parameters_are_typed():
    import inspect
    from acroname import engine as engmod
    for fn in (engmod.acronym, engmod.Engine.acronym, engmod.Engine.__init__):
        ann = inspect.signature(fn).parameters["dictionary"].annotation
        assert ann == "DictionarySource"
