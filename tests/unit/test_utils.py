"""tests/unit/test_utils.py"""

import pytest

from urlparams.exceptions import EncodingError, InvalidArgumentError, MalformedURLError
from urlparams.utils.encoding import decode, encode
from urlparams.utils.validators import (
    check_not_none,
    has_malformed_escape,
    validate_charset,
    validate_url,
)


class TestEncode:
    """Tests for encode()."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("abc", "abc"),
            ("hello world", "hello+world"),
            ("a&b=c", "a%26b%3Dc"),
            ("a*b.c-d_e~f", "a*b.c-d_e~f"),
            ("é", "%C3%A9"),
            ("", ""),
        ],
    )
    def test_encode_utf8(self, value, expected):
        """Test form encoding with UTF-8."""
        assert encode(value, "utf-8") == expected

    def test_encode_latin1(self):
        """Test escaped bytes follow the charset."""
        assert encode("é", "iso-8859-1") == "%E9"

    def test_encode_unrepresentable(self):
        """Test characters outside the charset raise EncodingError."""
        with pytest.raises(EncodingError):
            encode("€", "iso-8859-1")

    def test_encode_keeps_tilde(self):
        """Test "~" stays literal instead of becoming %7E."""
        assert encode("~user", "utf-8") == "~user"

    def test_encode_passthrough(self):
        """Test no charset leaves the value untouched."""
        assert encode("a b&c", None) == "a b&c"

    def test_encode_none_value(self):
        """Test None is rejected."""
        with pytest.raises(InvalidArgumentError):
            encode(None, "utf-8")


class TestDecode:
    """Tests for decode()."""

    def test_decode_utf8(self):
        """Test plus and escapes are decoded."""
        assert decode("hello+world%21", "utf-8") == "hello world!"
        assert decode("%C3%A9", "utf-8") == "é"

    def test_decode_latin1(self):
        """Test decoding with a single-byte charset."""
        assert decode("%E9", "iso-8859-1") == "é"

    def test_decode_invalid_bytes(self):
        """Test bytes invalid in the charset raise EncodingError."""
        with pytest.raises(EncodingError):
            decode("%FF", "utf-8")

    def test_decode_malformed_escape(self):
        """Test a broken escape pair raises EncodingError."""
        with pytest.raises(EncodingError):
            decode("100%", "utf-8")

    def test_decode_passthrough(self):
        """Test no charset leaves the value untouched."""
        assert decode("a+b%20", None) == "a+b%20"

    def test_decode_none_value(self):
        """Test None is rejected."""
        with pytest.raises(InvalidArgumentError):
            decode(None, None)


class TestValidators:
    """Tests for validation helpers."""

    def test_check_not_none(self):
        """Test None raises with the field name in the message."""
        check_not_none("", "name")
        with pytest.raises(InvalidArgumentError) as exc_info:
            check_not_none(None, "name")
        assert "name should not be null" in str(exc_info.value)

    @pytest.mark.parametrize("charset", [None, "utf-8", "UTF8", "iso-8859-1", "ascii"])
    def test_validate_charset_supported(self, charset):
        """Test known codecs are accepted."""
        validate_charset(charset)

    @pytest.mark.parametrize("charset", ["no-such-charset", "base64", "rot13", "hex", "zlib"])
    def test_validate_charset_unsupported(self, charset):
        """Test unknown and non-text codecs are rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_charset(charset)
        assert charset in str(exc_info.value)

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("a%20b", False),
            ("%zz", True),
            ("100%", True),
            ("%2", True),
            ("plain", False),
        ],
    )
    def test_has_malformed_escape(self, value, expected):
        """Test detection of broken escape pairs."""
        assert has_malformed_escape(value) is expected

    @pytest.mark.parametrize(
        "url",
        [
            "http://example.com",
            "http://user:pw@example.com:8080/a;b=c?d=e#f",
            "/relative/path?x=1",
            "?a=1",
            "",
            "mailto:joe@example.com",
            "localhost:8080",
        ],
    )
    def test_validate_url_accepts(self, url):
        """Test structurally valid URLs pass."""
        validate_url(url)

    @pytest.mark.parametrize(
        "url",
        [
            "http://example.com/a b",
            "http://example.com/\t",
            "http://example.com/<x>",
            "http://example.com/%zz",
            "1http://example.com",
            "://example.com",
            "http:",
            "http://h/p#a#b",
        ],
    )
    def test_validate_url_rejects(self, url):
        """Test malformed URLs raise MalformedURLError."""
        with pytest.raises(MalformedURLError):
            validate_url(url)

    def test_validate_url_second_hash_without_fragments(self):
        """Test "#" is plain data when fragments are not supported."""
        validate_url("http://h/p?a=1#b#c", supports_fragment=False)
