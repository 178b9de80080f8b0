import hashlib
import hmac as stdlib_hmac

import pytest

from otpkit import (
    HOTP,
    SHA256,
    InvalidCounter,
    InvalidDigits,
    InvalidKey,
    dynamic_truncate,
    hotp,
    int_to_bytestring,
)

# RFC 4226 appendix D
RFC4226_CODES = ["755224", "287082", "359152", "969429", "338314", "254676", "287922", "162583", "399871", "520489"]


@pytest.mark.parametrize(
    "counter,expected",
    [
        # first six bytes of the appendix D HMAC values, each mod 10
        (0, "477401"),  # cc93cf18508d...
        (1, "748523"),  # 75a48a19d4cb...
        (2, "123087"),  # 0bacb7fa082f...
    ],
)
def test_known_answers(rfc_key: bytes, counter: int, expected: str) -> None:
    assert hotp(rfc_key, counter) == expected


@pytest.mark.parametrize("counter", range(10))
def test_rfc4226_with_dynamic_truncation(rfc_key: bytes, counter: int) -> None:
    assert hotp(rfc_key, counter, truncate=dynamic_truncate) == RFC4226_CODES[counter]


@pytest.mark.parametrize("counter", [b"", b"0", b"\x00" * 8, "42", 7, 2**40])
def test_six_decimal_digits(counter) -> None:
    code = hotp(b"secret", counter)
    assert len(code) == 6
    assert all(c in "0123456789" for c in code)


def test_matches_stdlib_hmac_first_bytes() -> None:
    key = b"some key"
    tag = stdlib_hmac.new(key, b"counter", hashlib.sha1).digest()
    assert hotp(key, b"counter", digits=8) == "".join(str(b % 10) for b in tag[:8])


def test_string_and_bytes_counter_agree() -> None:
    assert hotp(b"k", "1234") == hotp(b"k", b"1234")


def test_int_counter_is_eight_bytes_big_endian() -> None:
    assert hotp(b"k", 5) == hotp(b"k", int_to_bytestring(5))


def test_empty_key_and_counter() -> None:
    # fbdb1d1b18aa... is HMAC-SHA1("", "")
    assert hotp(b"", b"") == "199740"


@pytest.mark.parametrize("digits", [1, 6, 8, 20])
def test_code_length_follows_digits(digits: int) -> None:
    assert len(hotp(b"k", b"c", digits=digits)) == digits


def test_swapped_engine() -> None:
    key = b"k"
    tag = stdlib_hmac.new(key, b"c", hashlib.sha256).digest()
    assert hotp(key, b"c", digits=32, engine=SHA256) == "".join(str(b % 10) for b in tag)


@pytest.mark.parametrize("digits", [0, -1, 21, 2.0, True, None])
def test_invalid_digits(counting_engine, digits) -> None:
    with pytest.raises(InvalidDigits):
        hotp(b"k", b"c", digits=digits, engine=counting_engine)
    assert counting_engine.calls == 0


def test_dynamic_truncation_digit_limit() -> None:
    assert len(hotp(b"k", 0, digits=10, truncate=dynamic_truncate)) == 10
    with pytest.raises(InvalidDigits):
        hotp(b"k", 0, digits=11, truncate=dynamic_truncate)


def test_dynamic_truncation_needs_long_digest() -> None:
    with pytest.raises(ValueError):
        HOTP(b"k", digest=hashlib.md5, truncate=dynamic_truncate)


@pytest.mark.parametrize("counter", [-1, 1.5, None, True])
def test_invalid_counter(counter) -> None:
    with pytest.raises(InvalidCounter):
        hotp(b"k", counter)


def test_text_key_rejected() -> None:
    with pytest.raises(InvalidKey):
        HOTP("JBSWY3DPEHPK3PXP")  # type: ignore[arg-type]


def test_at_uses_initial_count(rfc_key: bytes) -> None:
    otp = HOTP(rfc_key, truncate=dynamic_truncate, initial_count=3)
    assert otp.at(0) == RFC4226_CODES[3]
    assert otp.at(2) == RFC4226_CODES[5]


def test_accepts_hashlib_constructor() -> None:
    assert HOTP(b"k", digest=hashlib.sha256).at(0) == hotp(b"k", 0, engine=SHA256)
