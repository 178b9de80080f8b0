import base64
import binascii
from typing import Union

from .exceptions import InvalidCounter, InvalidKey

BytesLike = Union[bytes, bytearray, memoryview]


def as_key(key: BytesLike) -> bytes:
    """
    Returns the key as immutable bytes, rejecting anything that isn't a byte sequence.

    Text is refused rather than guessed at; use :func:`decode_base32` for
    the base32 secrets authenticator apps hand out.
    """
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise InvalidKey("key must be a byte sequence, got {0}".format(type(key).__name__))
    return bytes(key)


def pad_right(data: bytes, length: int, fill: bytes = b"\0") -> bytes:
    """
    Right-pads ``data`` with ``fill`` up to ``length`` bytes. Longer input is returned as is.
    """
    return bytes(bytearray(data).ljust(length, fill))


def xor_bytes(left: bytes, right: bytes) -> bytes:
    if len(left) != len(right):
        raise ValueError("cannot xor byte strings of different lengths")
    return bytes(a ^ b for a, b in zip(left, right))


def int_to_bytestring(i: int, padding: int = 8) -> bytes:
    """
    Turns an integer to the OATH specified
    bytestring, which is fed to the HMAC
    along with the secret
    """
    if i < 0:
        raise InvalidCounter("counter must be a non-negative integer")
    result = bytearray()
    while i != 0:
        result.append(i & 0xFF)
        i >>= 8
    # bytes come out least significant first
    return bytes(bytearray(reversed(result)).rjust(padding, b"\0"))


def int_to_decimal_bytes(i: int) -> bytes:
    """
    Encodes a counter as its ASCII decimal representation, e.g. 56843861 -> b"56843861".

    This is what :class:`otpkit.TOTP` feeds to the HMAC by default. It is not
    the RFC 6238 encoding; pass :func:`int_to_bytestring` for that.
    """
    if i < 0:
        raise InvalidCounter("counter must be a non-negative integer")
    return str(i).encode("ascii")


def first_bytes_truncate(tag: bytes, digits: int) -> str:
    """
    Reduces each of the first ``digits`` bytes of the tag modulo 10.

    Non-standard: codes produced this way do not match authenticator apps.
    Use :func:`dynamic_truncate` for RFC 4226 codes.
    """
    return "".join(str(b % 10) for b in tag[:digits])


def dynamic_truncate(tag: bytes, digits: int) -> str:
    """
    RFC 4226 section 5.3 dynamic truncation.

    The low nibble of the last byte selects a 4 byte window; the window's
    top bit is dropped and the 31-bit value is reduced modulo 10**digits.
    """
    hmac_hash = bytearray(tag)
    offset = hmac_hash[-1] & 0xF
    code = (
        (hmac_hash[offset] & 0x7F) << 24
        | (hmac_hash[offset + 1] & 0xFF) << 16
        | (hmac_hash[offset + 2] & 0xFF) << 8
        | (hmac_hash[offset + 3] & 0xFF)
    )
    str_code = str(10_000_000_000 + (code % 10**digits))
    return str_code[-digits:]


def decode_base32(secret: str) -> bytes:
    """
    Decodes a base32 secret such as "JBSWY3DPEHPK3PXP" into key bytes.

    Missing ``=`` padding is restored and case is ignored.

    :raises InvalidKey: if the text isn't valid base32
    """
    missing_padding = len(secret) % 8
    if missing_padding != 0:
        secret += "=" * (8 - missing_padding)
    try:
        return base64.b32decode(secret, casefold=True)
    except binascii.Error as e:
        raise InvalidKey("invalid base32 secret") from e
