"""Unit tests for the digest transforms."""

import hashlib
import zlib

import pytest
from passlib.hash import md5_crypt, sha256_crypt, sha512_crypt

from unistr import InvalidArgumentError, StringValue

pytestmark = pytest.mark.fast


class TestHexDigests:
    """Tests for md5, sha1 and hash."""

    def test_md5(self):
        assert StringValue("abc").md5() == "900150983cd24fb0d6963f7d28e17f72"
        assert StringValue("").md5() == "d41d8cd98f00b204e9800998ecf8427e"

    def test_sha1(self):
        assert StringValue("abc").sha1() == "a9993e364706816aba3e25717850c26c9cd0d89d"

    def test_digest_covers_encoded_bytes(self):
        utf8 = StringValue("é").md5()
        latin = StringValue("é", encoding="latin-1").md5()
        assert utf8 == hashlib.md5("é".encode("utf-8")).hexdigest()
        assert latin == hashlib.md5(b"\xe9").hexdigest()

    @pytest.mark.parametrize("name,expected", [
        ("sha256", hashlib.sha256(b"abc").hexdigest()),
        ("SHA512", hashlib.sha512(b"abc").hexdigest()),
        ("sha3-256", hashlib.sha3_256(b"abc").hexdigest()),
        ("blake2b", hashlib.blake2b(b"abc").hexdigest()),
        ("crc32b", "352441c2"),
        ("adler32", "024d0127"),
    ])
    def test_named_algorithms(self, name, expected):
        assert StringValue("abc").hash(name) == expected

    def test_default_algorithm_is_md5(self):
        assert StringValue("abc").hash() == StringValue("abc").md5()
        assert StringValue("abc").hashify() == StringValue("abc").md5()

    def test_raw_output(self):
        raw = StringValue("abc").hash("md5", raw_output=True)
        assert raw.buffer == hashlib.md5(b"abc").digest()
        assert raw.byte_length() == 16

    def test_raw_output_survives_codepoint_view(self):
        raw = StringValue("abc").hash("sha1", True)
        assert raw.copy().buffer == hashlib.sha1(b"abc").digest()
        assert raw.append("").buffer == hashlib.sha1(b"abc").digest()

    def test_unknown_algorithm(self):
        with pytest.raises(InvalidArgumentError):
            StringValue("abc").hash("md17")

    def test_variable_length_algorithm(self):
        with pytest.raises(InvalidArgumentError):
            StringValue("abc").hash("shake_128")


class TestCrc32:
    """Tests for crc32."""

    def test_decimal_unsigned(self):
        assert StringValue("abc").crc32() == "891568578"
        text = "The quick brown fox jumped over the lazy dog."
        assert StringValue(text).crc32() == str(zlib.crc32(text.encode()))

    def test_empty(self):
        assert StringValue("").crc32() == "0"


class TestCrypt:
    """Tests for the crypt(3) transform."""

    def test_md5_crypt_known_vector(self):
        result = StringValue("rasmuslerdorf").crypt("$1$rasmusle$")
        assert result == "$1$rasmusle$rISCgZzpwk3UhDidwXvin0"

    def test_des_crypt_known_vector(self):
        assert StringValue("rasmuslerdorf").crypt("rl") == "rl.3StKT.4T8M"

    def test_md5_salt_is_truncated(self):
        result = StringValue("secret").crypt("$1$abcdefghijk$")
        assert result.text.startswith("$1$abcdefgh$")
        assert md5_crypt.verify("secret", result.text)

    def test_sha256_crypt(self):
        result = StringValue("rasmuslerdorf").crypt("$5$rounds=5000$usesomesillystringforsalt$")
        assert result.text.startswith("$5$")
        assert "usesomesillystri$" in result.text
        assert sha256_crypt.verify("rasmuslerdorf", result.text)

    def test_sha512_crypt(self):
        result = StringValue("héllo").crypt("$6$saltsalt$")
        assert result.text.startswith("$6$saltsalt$")
        assert sha512_crypt.verify("héllo", result.text)

    def test_random_salt(self):
        first = StringValue("secret").crypt()
        second = StringValue("secret").crypt()
        assert first.text.startswith("$1$")
        assert md5_crypt.verify("secret", first.text)
        assert md5_crypt.verify("secret", second.text)

    def test_deterministic_with_salt(self):
        value = StringValue("secret")
        assert value.crypt("$1$saltsalt$") == value.crypt("$1$saltsalt$")

    @pytest.mark.parametrize("salt", ["$2y$10$abcdefghijklmnopqrstuu", "x", "$5$rounds=many$abc$"])
    def test_bad_salts(self, salt):
        with pytest.raises(InvalidArgumentError):
            StringValue("secret").crypt(salt)
