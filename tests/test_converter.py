import json
import logging

import pytest

from matrixconv import (
    ConversionError,
    ConversionOptions,
    ConverterConfig,
    DecodeError,
    EncodeError,
    UnsupportedFormatError,
    UnsupportedOptionError,
    convert,
    decode,
    encode,
)

CSV = "name,age\nAlice,30\nBob,25"
GRID = [["name", "age"], ["Alice", "30"], ["Bob", "25"]]


def test_decode_csv():
    assert decode(CSV, "csv") == GRID


def test_encode_csv():
    assert encode(GRID, "csv") == '"name","age"\n"Alice","30"\n"Bob","25"'


def test_csv_to_aoa():
    assert json.loads(convert(CSV, "csv", "aoa")) == GRID


def test_csv_to_aoo():
    out = convert(CSV, "csv", "aoo")
    assert json.loads(out) == [{"name": "Alice", "age": "30"}, {"name": "Bob", "age": "25"}]


def test_aoo_to_csv_no_quot():
    text = '[{"name":"Alice","age":"30"}]'
    assert convert(text, "aoo", "csv", ["no_quot"]) == "name,age\nAlice,30"


def test_csv_to_tsv_no_quot():
    assert convert("a,b\nc,d", "csv", "tsv", ["no_quot"]) == "a\tb\nc\td"


def test_tsv_to_csv_requotes():
    assert convert('a\tb,c\n"d""e"\tf', "tsv", "csv") == '"a","b,c"\n"d""e","f"'


def test_csv_to_html_with_dataset():
    out = convert("name,age\nAlice,30", "csv", "html", ["add_ds"])
    assert '<td data-row="0" data-col="0">Alice</td>' in out


def test_html_to_csv():
    html = convert("name,age\nAlice,30", "csv", "html")
    assert convert(html, "html", "csv", ["no_quot"]) == "name,age\nAlice,30"


def test_aoa_to_html_to_aoa():
    text = json.dumps([["h1", "h2"], ["<1>", "2 & 3"]])
    html = convert(text, "aoa", "html")
    assert json.loads(convert(html, "html", "aoa")) == [["h1", "h2"], ["<1>", "2 & 3"]]


def test_transpose_and_add_head():
    out = convert("a,b,c\n1,2,3", "csv", "aoa", ["add_head", "transpose"])
    assert json.loads(out) == [
        ["column_0", "column_1"],
        ["a", "1"],
        ["b", "2"],
        ["c", "3"],
    ]


def test_rm_lf_c_only_touches_decoding():
    text = '"id","note"\n"1","two\nlines"'
    assert convert(text, "csv", "aoa", ["rm_lf_c"]) == convert(
        '"id","note"\n"1","twolines"', "csv", "aoa"
    )


def test_options_object_is_accepted():
    opts = ConversionOptions(no_quot=True)
    assert convert("a,b", "csv", "csv", opts) == "a,b"


def test_calls_do_not_share_options():
    first = convert(CSV, "csv", "csv", ["no_quot", "transpose"])
    second = convert(CSV, "csv", "csv")
    assert first == "name,Alice,Bob\nage,30,25"
    assert second == '"name","age"\n"Alice","30"\n"Bob","25"'


def test_config_controls_json_indent():
    cfg = ConverterConfig(json_indent="  ")
    assert convert("a", "csv", "aoa", config=cfg) == '[\n  [\n    "a"\n  ]\n]'


def test_unsupported_format():
    with pytest.raises(UnsupportedFormatError):
        convert(CSV, "csv", "xml")
    with pytest.raises(UnsupportedFormatError):
        decode(CSV, "yaml")


def test_unsupported_option():
    with pytest.raises(UnsupportedOptionError):
        convert(CSV, "csv", "aoa", ["sort"])


def test_invalid_json_is_decode_error():
    with pytest.raises(DecodeError):
        convert("[1, 2", "aoa", "csv")


def test_missing_table_is_decode_error():
    with pytest.raises(DecodeError):
        convert("<p>nothing</p>", "html", "csv")


def test_empty_input_cannot_become_objects():
    with pytest.raises(EncodeError):
        convert("", "csv", "aoo")


def test_unexpected_decoder_failure_is_wrapped():
    with pytest.raises(DecodeError):
        decode(None, "aoa")


def test_all_failures_share_a_base_class():
    with pytest.raises(ConversionError):
        convert("{}", "aoo", "html")


def test_failure_is_logged(caplog):
    with caplog.at_level(logging.ERROR, logger="matrixconv"):
        with pytest.raises(ConversionError):
            convert("[", "aoa", "csv")
    assert any("failed" in r.getMessage() for r in caplog.records)


def test_dsv_formats_split_on_their_own_delimiter():
    assert decode("a\tb,c", "tsv") == [["a", "b,c"]]
    assert decode("a\tb,c", "csv") == [["a\tb", "c"]]
    assert encode([["a", "b"]], "tsv", ["no_quot"]) == "a\tb"
