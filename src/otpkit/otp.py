from typing import Any, Callable, Optional, Union

from . import utils
from .engine import SHA1, HashEngine
from .exceptions import InvalidCounter, InvalidDigits
from .mac import hmac

DEFAULT_DIGITS = 6

Counter = Union[int, str, bytes, bytearray, memoryview]


def check_digits(digits: int, limit: int) -> None:
    """
    Raises :class:`InvalidDigits` unless ``0 < digits <= limit``.
    """
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise InvalidDigits("digits must be an integer, got {0!r}".format(digits))
    if digits <= 0:
        raise InvalidDigits("digits must be positive")
    if digits > limit:
        raise InvalidDigits("digits must be no greater than {0}".format(limit))


def as_engine(digest: Any) -> HashEngine:
    if digest is None:
        return SHA1
    if isinstance(digest, HashEngine):
        return digest
    return HashEngine(digest)


class OTP(object):
    """
    Base class for OTP handlers.
    """

    def __init__(
        self,
        key: utils.BytesLike,
        digits: int = DEFAULT_DIGITS,
        digest: Any = None,
        truncate: Optional[Callable[[bytes, int], str]] = None,
        encode_counter: Optional[Callable[[int], bytes]] = None,
    ) -> None:
        """
        :param key: raw secret bytes
        :param digits: number of decimal digits in the OTP
        :param digest: :class:`HashEngine` or hashlib constructor, defaults to SHA-1
        :param truncate: turns the HMAC tag into the code, defaults to
            :func:`~otpkit.utils.first_bytes_truncate`
        :param encode_counter: turns an integer counter into the HMAC message
        """
        self.key = utils.as_key(key)
        self.digest = as_engine(digest)
        self.truncate = truncate or utils.first_bytes_truncate
        self.encode_counter = encode_counter or utils.int_to_bytestring

        if self.truncate is utils.dynamic_truncate:
            # the window can start as late as byte 15
            if self.digest.digest_size < 19:
                raise ValueError("digest size is lower than 19 bytes, which will trigger error on otp generation")
            limit = 10
        else:
            limit = self.digest.digest_size
        check_digits(digits, limit)
        self.digits = digits

    def generate_otp(self, counter: Counter) -> str:
        """
        :param counter: the HMAC moving factor. Integers go through
            ``encode_counter``; text and bytes are used as the message directly.
        :returns: OTP of exactly ``digits`` decimal characters
        """
        tag = hmac(self.key, self.counter_bytes(counter), self.digest)
        return self.truncate(tag, self.digits)

    def counter_bytes(self, counter: Counter) -> bytes:
        if isinstance(counter, bool):
            raise InvalidCounter("counter must not be a boolean")
        if isinstance(counter, int):
            return self.encode_counter(counter)
        if isinstance(counter, str):
            return counter.encode("utf-8")
        if isinstance(counter, (bytes, bytearray, memoryview)):
            return bytes(counter)
        raise InvalidCounter("unsupported counter type {0}".format(type(counter).__name__))
