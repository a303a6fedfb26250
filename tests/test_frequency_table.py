import io

import pytest

from markov_text.errors import ArgumentError
from markov_text.frequency_table import FrequencyTable, tokenize

TEXT = "I am not a number I am a free man"


def test_tokenize_splits_on_any_whitespace():
    assert tokenize("  a\tb\n\nc  ") == ["a", "b", "c"]
    assert tokenize("   ") == []


def test_builds_expected_prefixes():
    table = FrequencyTable(2)
    table.add_text(TEXT)

    assert table['"" ""'] == {"I": 1}
    assert table['"" I'] == {"am": 1}
    assert table["I am"] == {"not": 1, "a": 1}
    assert table["am a"] == {"free": 1}
    assert table["a free"] == {"man": 1}
    assert "free man" not in table
    assert len(table) == 9


def test_total_equals_tokens_consumed():
    table = FrequencyTable(3)
    consumed = table.add_text(TEXT)
    assert consumed == 10
    assert table.total() == 10


def test_counts_accumulate():
    table = FrequencyTable(1)
    table.add_text("a b a b a c")
    assert table["a"] == {"b": 2, "c": 1}
    assert table["b"] == {"a": 2}


def test_window_resets_between_streams():
    table = FrequencyTable(1)
    table.add_text("x y")
    table.add_text("y z")

    assert table['""'] == {"x": 1, "y": 1}
    assert table["y"] == {"z": 1}
    assert table.total() == 4


def test_window_carries_across_lines_of_one_stream():
    table = FrequencyTable(2)
    table.add_stream(io.StringIO("I am\nnot   a\n\nnumber\n"))
    assert table["I am"] == {"not": 1}
    assert table["am not"] == {"a": 1}
    assert table["not a"] == {"number": 1}


def test_add_file(tmp_path):
    source = tmp_path / "source.txt"
    source.write_text(TEXT + "\n", encoding="utf-8")

    from_file = FrequencyTable(2)
    from_file.add_file(source)
    from_text = FrequencyTable(2)
    from_text.add_text(TEXT)
    assert from_file == from_text


def test_add_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        FrequencyTable(1).add_file(tmp_path / "missing.txt")


def test_zero_prefix_length_shares_one_context():
    table = FrequencyTable(0)
    table.add_text("a b a")
    assert table.to_dict() == {"": {"a": 2, "b": 1}}


def test_empty_input_gives_empty_table():
    table = FrequencyTable(2)
    assert table.add_text("") == 0
    assert len(table) == 0
    assert table.total() == 0


def test_lookups_do_not_create_entries():
    table = FrequencyTable(1)
    assert table.suffixes("nope") == {}
    with pytest.raises(KeyError):
        table["nope"]
    assert len(table) == 0


def test_items_are_sorted():
    table = FrequencyTable(1)
    table.add_text("b a c")
    assert [key for key, _ in table.items()] == ['""', "a", "b"]
    assert list(table) == ['""', "a", "b"]


def test_negative_prefix_length_is_rejected():
    with pytest.raises(ArgumentError):
        FrequencyTable(-2)


def test_tokenize_keeps_information_separators():
    assert tokenize("a\x1cb c\x1fd e\u3000f") == ["a\x1cb", "c\x1fd", "e", "f"]


def test_stream_shorter_than_prefix():
    table = FrequencyTable(3)
    assert table.add_text("a") == 1
    assert table.to_dict() == {'"" "" ""': {"a": 1}}
    assert table.total() == 1
