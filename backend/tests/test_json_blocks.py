from __future__ import annotations

import pytest

from utils.json_blocks import find_first_json_object, parse_first_json_object

BARE = '{"title": "HackMIT", "tracks": [{"name": "AI", "subTracks": []}]}'


def test_prose_and_code_fence_around_object():
    response = f"Sure! Here is the data:\n```json\n{BARE}\n```\nLet me know if you need more."
    assert parse_first_json_object(response) == parse_first_json_object(BARE)


def test_nested_braces_are_balanced():
    text = 'prefix {"a": {"b": {"c": 1}}, "d": [ {"e": 2} ]} trailing {"other": true}'
    assert find_first_json_object(text) == '{"a": {"b": {"c": 1}}, "d": [ {"e": 2} ]}'


def test_braces_inside_strings_are_ignored():
    text = 'x {"rule": "Use {curly} braces \\" carefully }", "n": 1} y'
    assert parse_first_json_object(text) == {"rule": 'Use {curly} braces " carefully }', "n": 1}


def test_no_object_found():
    assert find_first_json_object("I could not find any data.") is None
    with pytest.raises(ValueError):
        parse_first_json_object("I could not find any data.")


def test_unbalanced_object():
    assert find_first_json_object('{"title": "cut off') is None


def test_invalid_json_raises_value_error():
    with pytest.raises(ValueError):
        parse_first_json_object("{title: 'single quotes'}")


def test_empty_text():
    assert find_first_json_object("") is None
