import pytest

from adr.src.utils.json_utils import dumps, is_unescaped, legacy_value, safe_loads
from adr.src.utils.text_utils import TextUtils


def test_safe_loads_bytes_and_bom():
    assert safe_loads(b'{"k":"v"}')["k"] == "v"
    assert safe_loads('\ufeff{"path": "docs"}') == {"path": "docs"}


def test_safe_loads_invalid_raises_value_error():
    with pytest.raises(ValueError):
        safe_loads('{\r\n\t"path":"C:\\docs"\r\n}')


def test_dumps_round_trip():
    text = dumps({"path": "docs/adr"})
    assert text.endswith("\n")
    assert safe_loads(text) == {"path": "docs/adr"}


def test_legacy_value_reads_unescaped_windows_path():
    text = '{\r\n\t"path":"C:\\projects\\docs"\r\n}'
    assert legacy_value(text, "path") == "C:\\projects\\docs"


def test_legacy_value_key_is_case_insensitive():
    assert legacy_value('{ "PATH" : "docs" }', "path") == "docs"
    assert legacy_value('{"other": "x"}', "path") is None


def test_legacy_value_keeps_escaped_quote_inside_value():
    assert legacy_value('{"path": "a\\"b"}', "path") == 'a\\"b'


def test_is_unescaped():
    assert is_unescaped("docs\\new")
    assert is_unescaped("C:\\docs")
    assert not is_unescaped("C:\\\\docs")
    assert not is_unescaped('say \\"hi\\"')
    assert not is_unescaped("docs/adr")


def test_parse_number():
    assert TextUtils.parse_number("0042-Use-Postgres.md") == 42
    assert TextUtils.parse_number("README.md") is None
    assert TextUtils.parse_number("12.md") is None


def test_title_from_filename_and_display_name():
    assert TextUtils.title_from_filename("0002-Use-Postgres.md") == "Use Postgres"
    assert TextUtils.display_name("0002-Use-Postgres.md") == "0002 Use Postgres"
    assert TextUtils.is_superseded("0002-Use-Postgres-(superceded).md")
    assert not TextUtils.is_superseded("0002-Use-Postgres.md")
