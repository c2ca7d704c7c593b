"""
One-way digest transforms.

These work on the raw buffer bytes, so the digest of a value depends on its
encoding. Hex output is re-encoded with the value's encoding; raw output is
stored as the digest bytes themselves.
"""

import hashlib
import zlib
from typing import Optional

from passlib.hash import des_crypt, md5_crypt, sha256_crypt, sha512_crypt

from unistr.exceptions import InvalidArgumentError
from . import codepoints
from .config import CRYPT_CONFIG

# Checksums hashlib does not provide, emitted big-endian like the hex form
_CHECKSUMS = {
    "crc32b": zlib.crc32,
    "adler32": zlib.adler32,
}

_SHA_CRYPT = {
    "$5$": sha256_crypt,
    "$6$": sha512_crypt,
}


def _digest(data: bytes, algorithm: str) -> bytes:
    name = str(algorithm).lower().replace("-", "_")

    if name in _CHECKSUMS:
        return (_CHECKSUMS[name](data) & 0xFFFFFFFF).to_bytes(4, "big")

    try:
        hasher = hashlib.new(name)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(f"Unknown hashing algorithm '{algorithm}'") from e
    if hasher.digest_size == 0:
        raise InvalidArgumentError(f"Variable-length algorithm '{algorithm}' is not supported")

    hasher.update(data)
    return hasher.digest()


def hash(buffer: bytes, encoding: str, algorithm: str = "md5", raw_output: bool = False) -> bytes:
    """
    Digest the buffer with a named algorithm.

    Args:
        buffer: Encoded text
        encoding: Encoding used for the hex output
        algorithm: Any hashlib name (case-insensitive, '-' or '_'), crc32b or adler32
        raw_output: Keep the binary digest instead of lowercase hex

    Raises:
        InvalidArgumentError: For unknown or variable-length algorithms.
    """
    digest = _digest(buffer, algorithm)
    if raw_output:
        return digest
    return codepoints.encode(digest.hex(), encoding)


def md5(buffer: bytes, encoding: str) -> bytes:
    return hash(buffer, encoding, "md5")


def sha1(buffer: bytes, encoding: str) -> bytes:
    return hash(buffer, encoding, "sha1")


def crc32(buffer: bytes, encoding: str) -> bytes:
    """Unsigned CRC-32 of the buffer, as decimal text."""
    return codepoints.encode(str(zlib.crc32(buffer) & 0xFFFFFFFF), encoding)


def _sha_crypt(secret: bytes, salt: str) -> str:
    handler = _SHA_CRYPT[salt[:3]]
    rest = salt[3:]
    rounds = CRYPT_CONFIG["sha_default_rounds"]

    if rest.startswith("rounds="):
        value, _, rest = rest[len("rounds="):].partition("$")
        try:
            rounds = int(value)
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid rounds in salt '{salt}'") from e
        rounds = min(max(rounds, handler.min_rounds), handler.max_rounds)

    salt_chars = rest.split("$", 1)[0][:CRYPT_CONFIG["sha_salt_size"]]
    return handler.using(salt=salt_chars, rounds=rounds).hash(secret)


def _crypt(secret: bytes, salt: Optional[str]) -> str:
    if salt is None:
        return md5_crypt.hash(secret)

    if salt.startswith("$1$"):
        salt_chars = salt[3:].split("$", 1)[0][:CRYPT_CONFIG["md5_salt_size"]]
        return md5_crypt.using(salt=salt_chars).hash(secret)

    if salt[:3] in _SHA_CRYPT:
        return _sha_crypt(secret, salt)

    if salt.startswith("$"):
        raise InvalidArgumentError(f"Unsupported crypt scheme in salt '{salt}'")

    if len(salt) < CRYPT_CONFIG["des_salt_size"]:
        raise InvalidArgumentError("Traditional crypt needs a two-character salt")
    return des_crypt.using(salt=salt[:CRYPT_CONFIG["des_salt_size"]]).hash(secret)


def crypt(buffer: bytes, encoding: str, salt: Optional[str] = None) -> bytes:
    """
    Unix crypt(3) hash of the buffer.

    The salt prefix picks the scheme: ``$1$`` MD5-crypt, ``$5$``/``$6$``
    SHA-256/512-crypt (with optional ``rounds=N$``), anything else of two or
    more characters traditional DES. Without a salt a random MD5-crypt salt
    is generated.

    Raises:
        InvalidArgumentError: For unsupported schemes or malformed salts.
    """
    if salt is not None:
        salt = codepoints.as_text(salt)
    try:
        hashed = _crypt(buffer, salt)
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid crypt salt '{salt}': {e}") from e
    return codepoints.encode(hashed, encoding)
