import logging

import pytest

from phpserial import MalformedInputError, PhpObject, UnsupportedTypeError, decode_session, encode_session


def test_encode_session():
    assert encode_session({"a": 1, "b": "x"}) == 'a|i:1;b|s:1:"x";'


def test_encode_session_from_pairs():
    assert encode_session([("b", None), ("a", True)]) == "b|N;a|b:1;"


def test_encode_empty_session():
    assert encode_session({}) == ""


def test_encode_session_skips_keys_with_delimiter(caplog):
    with caplog.at_level(logging.DEBUG, logger="phpserial.session"):
        assert encode_session({"a|b": 1, "c": True}) == "c|b:1;"
    assert "a|b" in caplog.text


def test_encode_session_rejects_non_string_keys():
    with pytest.raises(UnsupportedTypeError):
        encode_session({1: "x"})


def test_encode_session_nested_values():
    session = {"user": {"id": 7, "roles": ["admin"]}}
    assert encode_session(session) == 'user|a:2:{s:2:"id";i:7;s:5:"roles";a:1:{i:0;s:5:"admin";}}'


def test_decode_session():
    result = decode_session('a|i:1;b|s:1:"x";')
    assert result == {"a": 1, "b": "x"}
    assert list(result) == ["a", "b"]


def test_decode_empty_session():
    assert decode_session("") == {}


def test_decode_session_value_containing_delimiter():
    assert decode_session('k|s:3:"a|b";n|N;') == {"k": "a|b", "n": None}


def test_decode_session_stops_without_delimiter():
    assert decode_session("a|i:1;junk") == {"a": 1}


def test_decode_session_empty_key():
    assert decode_session("|i:1;") == {"": 1}


def test_decode_session_object_value():
    assert decode_session('obj|o:3:"Foo":1:{s:1:"x";d:0.5;}') == {"obj": PhpObject("Foo", {"x": 0.5})}


def test_decode_session_malformed_value():
    with pytest.raises(MalformedInputError):
        decode_session("a|i:1")
    with pytest.raises(MalformedInputError):
        decode_session('a|i:1;b|s:9:"x";')


def test_decode_session_options():
    with pytest.raises(MalformedInputError):
        decode_session("a|a:1:[i:0;i:1;]")
    assert decode_session("a|a:1:[i:0;i:1;]", {"strict": False}) == {"a": [1]}


def test_session_round_trip():
    session = {
        "user_id": 42,
        "name": "Zoë",
        "cart": [{"sku": "A-1", "qty": 2}, {"sku": "€-2", "qty": 1}],
        "flags": {"beta": True, "ratio": 0.75},
        "profile": PhpObject("Profile", {"bio": None}),
    }
    assert decode_session(encode_session(session)) == session


def test_session_repeated_keys_collapse():
    encoded = encode_session([("a", 1), ("a", 2)])
    assert encoded == "a|i:1;a|i:2;"
    assert decode_session(encoded) == {"a": 2}


def test_decode_session_nesting_beyond_interpreter_stack():
    text = "deep|" + "a:1:{i:0;" * 5000 + "N;" + "}" * 5000
    with pytest.raises(MalformedInputError):
        decode_session(text)
