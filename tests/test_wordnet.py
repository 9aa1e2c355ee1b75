"""Tests for the Wordnet facade and lazy pointer resolution."""

import logging

import pytest

from wnlookup import (
    ConfigError,
    FileHandleRegistry,
    LookupConfig,
    PartOfSpeech,
    Relation,
    Wordnet,
    WordnetError,
    normalize,
)
from wordnet_fixture import EXPORT_LINE


# === Lookup ===

def test_find_verb_import(wordnet):
    entry = wordnet.find_verb("import")

    assert entry.word == "import"
    assert entry.pos is PartOfSpeech.VERB
    assert entry.synset_offsets == (2346136, 2232722, 932636)
    assert entry.pointer_symbols == ("!", "@", "~", "+", ";")
    assert entry.tagsense_count == 1

    senses = entry.senses
    assert len(senses) == len(entry.synset_offsets)
    assert [s.synset_offset for s in senses] == list(entry.synset_offsets)
    assert [s.word for s in senses] == ["import", "import", "spell"]


def test_find_by_pos_symbol_and_name(wordnet):
    assert wordnet.find("import", "v") == wordnet.find("import", "verb")
    assert wordnet.find("import", PartOfSpeech.NOUN).synset_offsets == (1113500,)


def test_find_all_order(wordnet):
    excuse = wordnet.find_all("excuse")
    assert [e.pos for e in excuse] == [PartOfSpeech.NOUN, PartOfSpeech.VERB]

    loud = wordnet.find_all("loud")
    assert [e.pos for e in loud] == [PartOfSpeech.ADJECTIVE]


def test_find_absent_word(wordnet):
    assert wordnet.find_noun("zebra") is None
    assert wordnet.find_adverb("import") is None
    assert wordnet.find_all("zebra") == []


@pytest.mark.parametrize("word", ["", "   ", "\n"])
def test_find_blank_word(wordnet, word):
    assert wordnet.find_verb(word) is None


def test_find_normalizes_word(wordnet):
    entry = wordnet.find_verb("  Lead  On ")

    assert entry.word == "lead_on"
    assert str(entry) == "lead on"
    assert entry.senses[0].word == "deceive"


def test_normalize():
    assert normalize("Lead On") == "lead_on"
    assert normalize("  a  b\tc ") == "a_b_c"
    assert normalize("IMPORT") == "import"
    assert Wordnet.normalize("Fall Guy") == "fall_guy"


def test_punctuated_lemma(wordnet):
    assert wordnet.find_noun("O'Clock").word == "o'clock"
    assert wordnet.find_noun("A.D.").word == "a.d."


def test_sense_at(wordnet):
    sense = wordnet.sense_at(2346409, "v")

    assert sense.word == "export"
    assert sense.gloss == EXPORT_LINE.split("| ", 1)[1]
    # Senses loaded directly are bound too
    assert [str(s) for s in sense.hypernym] == ["trade"]


def test_fool_first_sense_pointer(wordnet):
    fool = wordnet.find_verb("fool")
    sense = fool.senses[0]

    assert sense.p_cnt == 4
    first = sense.pointers[0]
    assert first.symbol == "@"
    assert first.synset_offset == 2575082
    assert first.pos is PartOfSpeech.VERB
    assert sense.hypernym[0].word == "deceive"


def test_satellite_adjective(wordnet):
    sense = wordnet.find_adjective("satisfactory").senses[0]

    assert sense.ss_type == "s"
    assert sense.pos is PartOfSpeech.ADJECTIVE
    assert [str(s) for s in sense.similar_to] == ["good"]


# === Relations ===

def test_antonym_of_import(wordnet):
    sense = wordnet.find_verb("import").senses[0]
    assert [s.word for s in sense.antonym] == ["export"]


def test_record_relation_spans_all_senses(wordnet):
    entry = wordnet.find_verb("import")
    assert [s.word for s in entry.hypernym] == ["trade", "trade"]
    assert [s.word for s in entry.antonym] == ["export"]


def test_relation_method_and_attribute_agree(wordnet):
    entry = wordnet.find_verb("fool")
    assert entry.relation("hypernym") == entry.hypernym
    assert entry.relation(Relation.HYPERNYM) == entry.hypernym


def test_relation_crosses_parts_of_speech(wordnet):
    export = wordnet.sense_at(2346409, PartOfSpeech.VERB)

    related = export.derivationally_related_form
    assert len(related) == 5
    assert all(s.pos is PartOfSpeech.NOUN for s in related)
    assert [s.word for s in related] == [
        "export", "exportation", "export", "exporter", "exportation",
    ]
    assert [s.word for s in export.domain_topic] == ["commerce"]

    commerce = wordnet.find_noun("commerce").senses[0]
    assert [s.word for s in commerce.member_of_domain_topic] == ["export"]


def test_adverb_derived_from_adjective(wordnet):
    loudly = wordnet.find_adverb("loudly")

    assert [s.word for s in loudly.derived_from_adjective] == ["loud"]
    assert [s.word for s in loudly.antonym] == ["softly"]


def test_empty_relation_is_empty_list(wordnet):
    trade = wordnet.find_verb("trade")
    assert trade.hypernym == []

    spell = wordnet.find_verb("spell").senses[0]
    assert spell.pointers == ()
    assert spell.hypernym == []
    assert spell.antonym == []


def test_invalid_relation(wordnet):
    entry = wordnet.find_verb("import")
    with pytest.raises(ValueError):
        entry.relation("meronym")
    # A relation of another part of speech
    with pytest.raises(ValueError):
        entry.relation("similar_to")


def test_other_pos_relation_is_not_an_attribute(wordnet):
    verb_sense = wordnet.find_verb("import").senses[0]
    adj_sense = wordnet.find_adjective("good").senses[0]

    with pytest.raises(AttributeError):
        verb_sense.similar_to
    assert getattr(adj_sense, "hypernym", None) is None
    assert not hasattr(adj_sense, "hyponym")
    assert hasattr(adj_sense, "antonym")


def test_unknown_attribute(wordnet):
    entry = wordnet.find_verb("import")
    with pytest.raises(AttributeError):
        entry.hypnym
    with pytest.raises(AttributeError):
        entry.senses[0]._missing


def test_unbound_record(wordnet):
    record = wordnet.index_file("v").find("import")
    with pytest.raises(WordnetError):
        record.senses
    with pytest.raises(WordnetError):
        record.hypernym


# === Caching ===

def test_senses_loaded_once(dict_dir, counting_registry):
    with Wordnet(dict_dir, registry=counting_registry) as wn:
        entry = wn.find_verb("import")
        first = entry.senses
        reads = counting_registry.reads

        second = entry.senses
        assert counting_registry.reads == reads
        assert [a is b for a, b in zip(first, second)] == [True] * 3


def test_relations_resolved_once(dict_dir, counting_registry):
    with Wordnet(dict_dir, registry=counting_registry) as wn:
        entry = wn.find_verb("fool")
        sense = entry.senses[0]

        first = sense.hypernym
        reads = counting_registry.reads
        assert sense.hypernym == first
        assert sense.hypernym[0] is first[0]
        assert counting_registry.reads == reads

        record_level = entry.hypernym
        reads = counting_registry.reads
        assert entry.hypernym == record_level
        assert counting_registry.reads == reads


def test_returned_lists_are_copies(wordnet):
    entry = wordnet.find_verb("import")
    entry.senses.clear()
    entry.hypernym.clear()

    assert len(entry.senses) == 3
    assert len(entry.hypernym) == 2


def test_caches_are_per_instance(wordnet):
    imported = wordnet.find_verb("import")
    fooled = wordnet.find_verb("fool")

    assert [s.word for s in imported.hypernym] == ["trade", "trade"]
    assert [s.word for s in fooled.hypernym] == ["deceive", "fool"]
    # Resolving one record never fills another's cache
    assert [s.word for s in imported.hypernym] == ["trade", "trade"]


def test_same_word_found_twice_gives_independent_records(wordnet):
    a = wordnet.find_verb("import")
    b = wordnet.find_verb("import")

    assert a == b
    assert a is not b
    a.senses
    assert b._senses is None


# === Configuration ===

def test_missing_data_dir(tmp_path):
    with pytest.raises(ConfigError):
        Wordnet(tmp_path / "missing")


def test_missing_file(tmp_path):
    with Wordnet(tmp_path) as wn:
        with pytest.raises(ConfigError):
            wn.find_noun("import")
        with pytest.raises(ConfigError):
            wn.sense_at(2346409, "v")


def test_data_dir_from_config(dict_dir):
    with Wordnet(config=LookupConfig(data_dir=dict_dir)) as wn:
        assert wn.data_dir == dict_dir
        assert wn.find_verb("export") is not None


def test_small_windows(dict_dir):
    config = LookupConfig(line_window=8, search_window=16)
    with Wordnet(dict_dir, config=config) as wn:
        entry = wn.find_verb("import")
        assert [s.word for s in entry.senses] == ["import", "import", "spell"]
        assert wn.find_noun("long_entry").synset_count == 60


def test_unknown_pos(wordnet):
    with pytest.raises(ValueError):
        wordnet.find("import", "x")


def test_shared_registry_left_open(dict_dir):
    registry = FileHandleRegistry()
    with Wordnet(dict_dir, registry=registry) as wn:
        wn.find_verb("import").senses
    assert len(registry) == 2
    registry.close()


def test_own_registry_closed(dict_dir):
    wn = Wordnet(dict_dir)
    wn.find_verb("import")
    registry = wn.registry
    assert len(registry) == 1

    wn.close()
    assert len(registry) == 0


# === Logging ===

def test_logs_to_package_logger(dict_dir, caplog):
    caplog.set_level(logging.DEBUG, logger="wnlookup")
    with Wordnet(dict_dir) as wn:
        wn.find_verb("zebra")

    messages = [r.getMessage() for r in caplog.records]
    assert any("data directory" in m for m in messages)
    assert any("No verb entry for 'zebra'" in m for m in messages)


def test_injected_logger(dict_dir, caplog):
    log = logging.getLogger("tests.lookup")
    caplog.set_level(logging.DEBUG, logger="tests.lookup")
    with Wordnet(dict_dir, log=log) as wn:
        wn.find_verb("import").senses

    names = {r.name for r in caplog.records}
    assert names == {"tests.lookup"}
    assert any("Loading 3 senses" in r.getMessage() for r in caplog.records)


def test_trace_level_probes(dict_dir, caplog):
    from wnlookup import TRACE

    caplog.set_level(TRACE, logger="wnlookup")
    with Wordnet(dict_dir) as wn:
        wn.find_verb("export")

    assert any(r.levelname == "TRACE" for r in caplog.records)


class TraceSink:
    """Logger stand-in with only debug/info/warn/trace."""

    def __init__(self):
        self.records = []

    def _record(level):
        def emit(self, msg, *args):
            self.records.append((level, msg % args))
        return emit

    debug = _record("debug")
    info = _record("info")
    warn = _record("warn")
    trace = _record("trace")


def test_duck_typed_log_sink(dict_dir):
    sink = TraceSink()
    with Wordnet(dict_dir, log=sink, config=LookupConfig(line_window=8)) as wn:
        entry = wn.find_verb("import")
        assert [s.word for s in entry.senses] == ["import", "import", "spell"]

    levels = {level for level, _ in sink.records}
    assert {"info", "debug", "trace"} <= levels
    assert any("probe" in msg for level, msg in sink.records if level == "trace")
