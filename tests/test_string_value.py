"""Unit tests for StringValue construction and the paired transform API."""

import copy

import pytest

from unistr import InvalidArgumentError, NotFoundError, QuoteStyle, StringValue

pytestmark = pytest.mark.fast


class TestConstruction:
    """Tests for the constructors."""

    def test_from_raw_wraps_text(self):
        value = StringValue.from_raw("héllo")
        assert value.text == "héllo"
        assert value.buffer == "héllo".encode("utf-8")
        assert value.encoding == "utf-8"

    def test_missing_or_empty_is_empty(self):
        assert StringValue.from_raw(None).text == ""
        assert StringValue.from_raw("").byte_length() == 0
        assert StringValue().length() == 0

    def test_bytes_are_taken_verbatim(self):
        assert StringValue(b"\xc3\xa9").text == "é"
        assert StringValue(bytearray(b"ab")).buffer == b"ab"

    def test_other_values_go_through_str(self):
        assert StringValue(42).text == "42"
        assert StringValue(1.5).text == "1.5"

    def test_encoding_is_per_instance(self):
        latin = StringValue("é", encoding="latin-1")
        utf8 = StringValue("é")
        assert latin.byte_length() == 1
        assert utf8.byte_length() == 2
        assert latin.length() == utf8.length() == 1

    def test_encoding_name_is_normalized(self):
        assert StringValue("x", encoding="UTF8").encoding == "utf-8"

    def test_unknown_encoding_rejected(self):
        with pytest.raises(InvalidArgumentError):
            StringValue("x", encoding="no-such-codec")

    def test_unencodable_text_rejected(self):
        with pytest.raises(InvalidArgumentError):
            StringValue("€", encoding="ascii")

    def test_rewraps_another_value_in_new_encoding(self):
        value = StringValue(StringValue("é"), encoding="latin-1")
        assert value.buffer == b"\xe9"

    def test_from_joined(self):
        assert StringValue.from_joined(["a", "b", "c"], "-").text == "a-b-c"
        assert StringValue.from_joined(("x", StringValue("y"), 3)).text == "xy3"
        assert StringValue.from_joined([]).text == ""

    @pytest.mark.parametrize("items", ["abc", b"abc", None, 5, {"a": 1}, {"a", "b"}])
    def test_from_joined_requires_sequence(self, items):
        with pytest.raises(InvalidArgumentError):
            StringValue.from_joined(items)

    def test_from_file_contents(self, sample_file):
        value = StringValue.from_file_contents(sample_file)
        assert value.text == "héllo wörld\n"
        assert value.length() == 12

    def test_from_file_contents_accepts_str_path(self, sample_file):
        assert StringValue.from_file_contents(str(sample_file)).length() == 12

    def test_from_missing_file(self, temp_dir):
        with pytest.raises(NotFoundError) as exc_info:
            StringValue.from_file_contents(temp_dir / "missing.txt")
        assert exc_info.value.path.endswith("missing.txt")

    def test_from_directory(self, temp_dir):
        with pytest.raises(NotFoundError):
            StringValue.from_file_contents(temp_dir)


class TestProtocols:
    """Tests for Python protocol support."""

    def test_str_bytes_len(self):
        value = StringValue("héllo")
        assert str(value) == "héllo"
        assert bytes(value) == "héllo".encode("utf-8")
        assert len(value) == 5

    def test_equality(self):
        value = StringValue("abc")
        assert value == "abc"
        assert value == StringValue("abc")
        assert value == b"abc"
        assert value != "abd"
        assert value != 3

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(StringValue("abc"))

    def test_copy_is_independent(self):
        value = StringValue("abc")
        for clone in (value.copy(), copy.copy(value)):
            clone.append_me("d")
            assert value == "abc"
            assert clone == "abcd"

    def test_repr(self):
        assert repr(StringValue("é")) == "StringValue('é', encoding='utf-8')"


class TestLength:
    """Tests for length, count and truncate."""

    def test_multibyte_length(self):
        value = StringValue("héllo")
        assert value.length() == 5
        assert value.count() == 5
        assert value.byte_length() == 6

    def test_astral_codepoints(self):
        value = StringValue("a😀b")
        assert value.length() == 3
        assert value.byte_length() == 6
        assert value.get(1) == "😀"

    def test_truncate(self):
        value = StringValue("héllo")
        assert value.truncate(3) is value
        assert value == "hél"

    def test_truncate_longer_is_noop(self):
        assert StringValue("héllo").truncate(10) == "héllo"
        assert StringValue("héllo").truncate(5) == "héllo"

    def test_truncate_negative_drops_from_end(self):
        assert StringValue("héllo").truncate(-1) == "héll"


class TestSubstring:
    """Tests for codepoint-offset slicing."""

    def test_basic(self):
        value = StringValue("héllo")
        assert value.substring(1, 2) == "él"
        assert value.substring(1) == "éllo"
        assert value.substr(0, 1) == "h"

    def test_out_of_range_start_is_empty(self):
        assert StringValue("héllo").substring(5) == ""
        assert StringValue("héllo").substring(99, 3) == ""

    def test_negative_start_counts_from_end(self):
        assert StringValue("héllo").substring(-3) == "llo"
        assert StringValue("héllo").substring(-10, 2) == "hé"

    def test_negative_count_leaves_off_end(self):
        assert StringValue("héllo").substring(1, -1) == "éll"
        assert StringValue("héllo").substring(3, -4) == ""

    def test_never_raises_and_respects_count(self):
        samples = ["", "a", "héllo", "a😀bç", "日本語テキスト"]
        for text in samples:
            value = StringValue(text)
            for start in range(0, len(text) + 2):
                for count in range(0, len(text) + 2):
                    result = value.substring(start, count)
                    assert result.length() <= count
                    assert result.length() <= max(0, len(text) - start)
                    assert result == text[start:start + count]
                assert value.substring(start).length() <= max(0, len(text) - start)


class TestCaseTransforms:
    """Tests for case folding transforms."""

    def test_upper_lower(self):
        assert StringValue("héllo").upper_case() == "HÉLLO"
        assert StringValue("HÉLLO").lower_case() == "héllo"
        assert StringValue("héllo").upper() == "HÉLLO"
        assert StringValue("HÉLLO").lower() == "héllo"

    def test_upper_case_is_idempotent(self):
        value = StringValue("Straße über")
        assert value.upper_case().upper_case() == value.upper_case()

    def test_upper_first(self):
        assert StringValue("élan").upper_first() == "Élan"
        assert StringValue("ßa").upper_first() == "SSa"
        assert StringValue("").upper_first() == ""

    def test_lower_first(self):
        assert StringValue("ÉLAN").lower_first() == "éLAN"
        assert StringValue("").lower_first() == ""

    def test_upper_words(self):
        assert StringValue("hello wörld").upper_words() == "Hello Wörld"
        assert StringValue("HELLO world").upper_words() == "Hello World"

    def test_upper_words_keeps_apostrophes_inside_words(self):
        assert StringValue("they're here").upper_words() == "They're Here"
        assert StringValue("l’eau d'été").upper_words() == "L’eau D'été"
        assert StringValue("rock 'n' roll").upper_words() == "Rock 'N' Roll"


class TestHtmlEscape:
    """Tests for html_escape and its quote policies."""

    SOURCE = '<a href="x">Tom & Jerry\'s</a>'

    def test_default_escapes_double_quotes_only(self):
        assert StringValue(self.SOURCE).html_escape() == (
            "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry's&lt;/a&gt;"
        )

    def test_both_quotes(self):
        assert StringValue(self.SOURCE).html_escape(QuoteStyle.BOTH) == (
            "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#039;s&lt;/a&gt;"
        )

    def test_no_quotes(self):
        assert StringValue(self.SOURCE).html("none") == (
            '&lt;a href="x"&gt;Tom &amp; Jerry\'s&lt;/a&gt;'
        )

    def test_unknown_style(self):
        with pytest.raises(InvalidArgumentError):
            StringValue("x").html_escape("single")


class TestTrim:
    """Tests for trim, trim_left and trim_right."""

    def test_default_whitespace(self):
        assert StringValue("  hi \n\t").trim() == "hi"
        assert StringValue("\0hi\x0b").trim() == "hi"

    def test_trim_is_idempotent(self):
        value = StringValue("  hi  ")
        assert value.trim().trim() == value.trim()

    def test_custom_chars(self):
        assert StringValue("xxhixx").trim("x") == "hi"
        assert StringValue("xxhixx").trim_left("x") == "hixx"
        assert StringValue("xxhixx").trim_right("x") == "xxhi"

    def test_multibyte_chars(self):
        assert StringValue("«hi»").trim("«»") == "hi"

    def test_ranges(self):
        assert StringValue("abchiabc").trim("a..c") == "hi"
        assert StringValue("123abc456").trim("0..9") == "abc"

    def test_reversed_range_is_literal(self):
        assert StringValue("z..a").trim("z..a") == ""
        assert StringValue("zmz").trim("z..a") == "m"


class TestSplitAndAppend:
    """Tests for split and append."""

    def test_split(self):
        assert StringValue("a,b,,c").split(",") == ["a", "b", "", "c"]
        assert StringValue("hé→lo→x").split("→") == ["hé", "lo", "x"]

    def test_split_empty_delimiter(self):
        with pytest.raises(InvalidArgumentError):
            StringValue("abc").split("")

    def test_append(self):
        value = StringValue("hé")
        assert value.append("llo") == "héllo"
        assert value == "hé"


class TestPairedForms:
    """Value and in-place forms must agree and must not alias."""

    OPERATIONS = [
        ("append", ("!",)),
        ("substring", (2, 4)),
        ("upper_case", ()),
        ("lower_case", ()),
        ("upper_first", ()),
        ("lower_first", ()),
        ("upper_words", ()),
        ("html_escape", (QuoteStyle.BOTH,)),
        ("trim", ()),
        ("trim_left", ()),
        ("trim_right", (" d",)),
        ("replace", ("ö", "o")),
        ("replace", ("/l+/", "L")),
        ("crypt", ("$1$saltsalt$",)),
        ("md5", ()),
        ("sha1", ()),
        ("hash", ("sha256",)),
        ("hash", ("md5", True)),
        ("crc32", ()),
    ]

    @pytest.mark.parametrize("name,args", OPERATIONS)
    def test_value_form_matches_mutating_form(self, name, args):
        original = StringValue("  Héllo Wörld  ")
        expected = getattr(original, name)(*args)

        clone = original.copy()
        returned = getattr(clone, f"{name}_me")(*args)

        assert returned is clone
        assert clone.buffer == expected.buffer
        assert original == "  Héllo Wörld  "

    @pytest.mark.parametrize("name,args", OPERATIONS)
    def test_value_form_returns_new_instance(self, name, args):
        original = StringValue("  Héllo Wörld  ")
        result = getattr(original, name)(*args)
        assert result is not original
        assert result.encoding == original.encoding

    def test_mutating_forms_chain(self):
        value = StringValue("  héllo ")
        assert value.trim_me().upper_first_me().append_me("!") is value
        assert value == "Héllo!"

    def test_aliases_pair_up(self):
        value = StringValue("abc")
        assert value.upper_me() is value
        assert value.lower_me() == "abc"
        assert value.html_me() is value
        assert value.hashify_me("md5") is value

    def test_no_aliasing_between_results(self):
        x = StringValue("abc")
        y = x.upper_case()
        y.append_me("z")
        assert x == "abc"
        assert y == "ABCz"

        x.append_me("d")
        assert y == "ABCz"

    def test_mutating_form_keeps_cursor(self):
        value = StringValue("abc")
        value.advance()
        value.upper_case_me()
        assert value.current_index() == 1
        assert value.current_value() == "B"
