import pytest
from hypothesis import given, strategies as st

from pfmt.numconv import to_signed, to_unsigned, utoa_base
from pfmt.printf import format, printf


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", (42,)),
        ("%i", (-17,)),
        ("%5d", (42,)),
        ("%-5d|", (42,)),
        ("%05d", (-42,)),
        ("%+d", (5,)),
        ("% d", (5,)),
        ("%.3d", (7,)),
        ("%x", (255,)),
        ("%X", (255,)),
        ("%#x", (255,)),
        ("%#X", (255,)),
        ("%s", ("hi",)),
        ("%.2s", ("hello",)),
        ("%7s|", ("abc",)),
        ("%-7s|", ("abc",)),
        ("%c", ("A",)),
        ("%-3c|", ("B",)),
        ("100%%", ()),
        ("%*d", (5, 42)),
        ("%.*d", (3, 7)),
        ("a %s b %d c %x", ("mid", 10, 16)),
    ],
)
def test_matches_standard_formatting(fmt, args):
    assert format(fmt, *args) == fmt % args


def test_literal_text_only():
    assert format("hello, world") == "hello, world"


def test_empty_format():
    assert format("") == ""


def test_unsigned_wraps_to_32_bits():
    assert format("%u", -1) == str(to_unsigned(-1, 32))


def test_signed_wraps_to_32_bits():
    assert format("%d", 2**31) == str(to_signed(2**31, 32))


def test_long_modifier_keeps_64_bits():
    assert format("%ld", 2**40) == str(2**40)
    assert format("%lld", -(2**40)) == str(-(2**40))


def test_char_length_modifier():
    assert format("%hhd", 300) == str(to_signed(300, 8))


def test_short_length_modifier():
    assert format("%hu", 70000) == str(to_unsigned(70000, 16))


def test_pointer():
    assert format("%p", 0x2A) == "0x" + utoa_base(0x2A, 16)


def test_null_string():
    assert format("%s", None) == "(null)"


def test_concatenation_of_parts():
    combined = format("%s=%d;%x", "key", -3, 4095)
    assert combined == format("%s", "key") + "=" + format("%d", -3) + ";" + format("%x", 4095)


def test_surplus_arguments_ignored():
    assert format("%d", 1, 2, 3) == format("%d", 1)


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format("%d")


def test_incomplete_spec_raises():
    with pytest.raises(ValueError):
        format("abc%")


def test_unterminated_spec_raises():
    with pytest.raises(ValueError):
        format("%5", 1)


def test_bad_integer_argument_raises():
    with pytest.raises(TypeError):
        format("%d", "x")


def test_bad_star_argument_raises():
    with pytest.raises(TypeError):
        format("%*d", "x", 1)


def test_non_string_format_raises():
    with pytest.raises(TypeError):
        format(b"%d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf("%s-%05d\n", "id", 42)
    out = capsys.readouterr().out
    assert out == "id-%05d\n" % 42
    assert count == len(out)


def test_printf_error_writes_nothing(capsys):
    with pytest.raises(ValueError):
        printf("value %d")
    assert capsys.readouterr().out == ""


@given(st.text().filter(lambda s: "%" not in s))
def test_text_without_percent_is_unchanged(text):
    assert format(text) == text


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_decimal_matches_str(n):
    assert format("%d", n) == str(n)


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_hex_matches_standard(n):
    assert format("%x", n) == "%x" % n
    assert format("%X", n) == "%X" % n


@given(
    st.integers(min_value=-(2**31), max_value=2**31 - 1),
    st.integers(min_value=0, max_value=30),
)
def test_width_is_a_minimum(n, width):
    out = format("%*d", width, n)
    assert len(out) == max(width, len(str(n)))
    assert out.strip() == str(n)


@given(st.text(alphabet=st.characters(blacklist_characters="\0")), st.integers(0, 20))
def test_string_precision_truncates(text, precision):
    assert format("%.*s", precision, text) == text[:precision]