import io

import pytest

from ftprint.printf import convert, printf, render


def test_plain_text_unchanged():
    assert render("hello, world") == "hello, world"


def test_empty_format():
    assert render("") == ""


def test_decimal_and_integer():
    assert render("%d and %i", 42, -17) == "42 and -17"


def test_char_and_string():
    assert render("[%c|%s]", "x", "abc") == "[x|abc]"


def test_null_string():
    assert render("%s", None) == "(null)"


def test_null_pointer():
    assert render("%p", 0) == "(nil)"


def test_pointer_prefix_and_value():
    text = render("%p", 0xBEEF)
    assert text.startswith("0x")
    assert int(text, 16) == 0xBEEF


def test_hex_lower_and_upper():
    lower, upper = render("%x %X", 48879, 48879).split()
    assert upper == lower.upper()
    assert int(lower, 16) == 48879


def test_unsigned():
    assert int(render("%u", 3000000000)) == 3000000000


def test_percent_literal():
    assert render("100%%") == "100%"


def test_trailing_percent_kept():
    assert render("abc%") == "abc%"


def test_unknown_specifier_dropped():
    assert render("a%qb") == "ab"


def test_unknown_specifier_consumes_no_argument():
    assert render("%q%d", 5) == "5"


def test_arguments_consumed_in_order():
    assert render("%s-%s-%s", "a", "b", "c") == "a-b-c"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        render("%d %d", 1)


def test_convert_percent_takes_nothing():
    values = iter([9])
    assert convert("%", values) == "%"
    assert next(values) == 9


def test_convert_takes_one_value():
    values = iter([12, "rest"])
    assert convert("d", values) == "12"
    assert next(values) == "rest"


def test_convert_unknown_spec():
    values = iter([1])
    assert convert("z", values) == ""
    assert next(values) == 1


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s=%d%%", "n", 7, stream=stream)
    assert stream.getvalue() == "n=7%"
    assert count == len(stream.getvalue())


def test_printf_count_matches_render():
    stream = io.StringIO()
    count = printf("%p %s", None, None, stream=stream)
    assert count == len(render("%p %s", None, None))
    assert stream.getvalue() == "(nil) (null)"


def test_printf_defaults_to_stdout(capsys):
    count = printf("hi %c", "!")
    assert capsys.readouterr().out == "hi !"
    assert count == 4