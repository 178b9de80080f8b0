from typing import Any, Callable, Optional

from . import utils
from .engine import SHA1, HashEngine
from .otp import DEFAULT_DIGITS, OTP, Counter


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(
        self,
        key: utils.BytesLike,
        digits: int = DEFAULT_DIGITS,
        digest: Any = None,
        truncate: Optional[Callable[[bytes, int], str]] = None,
        initial_count: int = 0,
    ) -> None:
        """
        :param key: raw secret bytes
        :param digits: number of integers in the OTP
        :param digest: digest function to use in the HMAC (defaults to SHA1)
        :param truncate: tag-to-code function
        :param initial_count: starting HMAC counter value, defaults to 0
        """
        self.initial_count = initial_count
        super().__init__(key, digits=digits, digest=digest, truncate=truncate)

    def at(self, count: int) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter, offset by ``initial_count``
        :returns: OTP
        """
        return self.generate_otp(self.initial_count + count)


def hotp(
    key: utils.BytesLike,
    counter: Counter,
    digits: int = DEFAULT_DIGITS,
    engine: HashEngine = SHA1,
    truncate: Optional[Callable[[bytes, int], str]] = None,
) -> str:
    """
    One-shot HOTP: ``truncate(HMAC(key, counter), digits)``.

    >>> hotp(b"12345678901234567890", 0)
    '477401'
    """
    return HOTP(key, digits=digits, digest=engine, truncate=truncate).generate_otp(counter)
