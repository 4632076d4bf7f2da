import json

import pytest

from matrixconv.errors import DecodeError, EncodeError
from matrixconv.formats.json_matrix import (
    decode_array_of_arrays,
    decode_array_of_objects,
    encode_array_of_arrays,
    encode_array_of_objects,
    grid_to_records,
)


def test_decode_array_of_arrays_keeps_ragged_rows():
    assert decode_array_of_arrays('[["a","b"],["c"]]') == [["a", "b"], ["c"]]


def test_decode_array_of_arrays_renders_scalars_as_cells():
    assert decode_array_of_arrays('[[1, true, null, "x"]]') == [["1", "true", "null", "x"]]


@pytest.mark.parametrize("text", ['{"a": 1}', '[["a"], "b"]', "[", "", "not json"])
def test_decode_array_of_arrays_errors(text):
    with pytest.raises(DecodeError):
        decode_array_of_arrays(text)


def test_decode_array_of_objects():
    text = '[{"name":"Alice","age":"30"},{"name":"Bob","age":"25"}]'
    assert decode_array_of_objects(text) == [
        ["name", "age"],
        ["Alice", "30"],
        ["Bob", "25"],
    ]


def test_decode_array_of_objects_uses_each_objects_own_value_order():
    text = '[{"a":"1","b":"2"},{"b":"4","a":"3"}]'
    assert decode_array_of_objects(text) == [["a", "b"], ["1", "2"], ["4", "3"]]


@pytest.mark.parametrize("text", ["[]", "[1]", '{"a": "b"}', '[{"a": "b"}, ["c"]]'])
def test_decode_array_of_objects_errors(text):
    with pytest.raises(DecodeError):
        decode_array_of_objects(text)


def test_encode_array_of_arrays_tab_indented():
    assert encode_array_of_arrays([["a", "b"]]) == '[\n\t[\n\t\t"a",\n\t\t"b"\n\t]\n]'


def test_encode_array_of_arrays_keeps_non_ascii():
    assert "é" in encode_array_of_arrays([["é"]])
    assert "\\u00e9" in encode_array_of_arrays([["é"]], ensure_ascii=True)


def test_encode_array_of_objects():
    out = encode_array_of_objects([["name", "age"], ["Alice", "30"]])
    assert json.loads(out) == [{"name": "Alice", "age": "30"}]
    assert out == '[\n\t{\n\t\t"name": "Alice",\n\t\t"age": "30"\n\t}\n]'


def test_records_zip_by_position():
    grid = [["a", "b"], ["1"], ["2", "3", "4"]]
    assert grid_to_records(grid) == [{"a": "1"}, {"a": "2", "b": "3"}]


def test_encode_array_of_objects_header_only():
    assert encode_array_of_objects([["a"]]) == "[]"


def test_encode_array_of_objects_needs_header():
    with pytest.raises(EncodeError):
        encode_array_of_objects([])


def test_encode_unserializable_cell():
    with pytest.raises(EncodeError):
        encode_array_of_arrays([[object()]])
