import calendar
import datetime
import time
from typing import Any, Callable, Optional, Union

from . import utils
from .engine import SHA1, HashEngine
from .otp import DEFAULT_DIGITS, OTP

DEFAULT_INTERVAL = 30

Clock = Callable[[], Union[int, float]]
Instant = Union[int, float, datetime.datetime]


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    def __init__(
        self,
        key: utils.BytesLike,
        digits: int = DEFAULT_DIGITS,
        digest: Any = None,
        truncate: Optional[Callable[[bytes, int], str]] = None,
        interval: int = DEFAULT_INTERVAL,
        clock: Optional[Clock] = None,
        encode_counter: Optional[Callable[[int], bytes]] = None,
    ) -> None:
        """
        :param key: raw secret bytes
        :param digits: number of integers in the OTP
        :param digest: digest function to use in the HMAC (defaults to SHA1)
        :param truncate: tag-to-code function
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        :param clock: returns the current Unix time in seconds, defaults to ``time.time``
        :param encode_counter: time step to HMAC message. Defaults to the
            decimal string of the step; pass ``utils.int_to_bytestring`` for RFC 6238.
        """
        if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
            raise ValueError("interval must be a positive number of seconds")
        self.interval = interval
        self.clock = clock or time.time
        super().__init__(
            key,
            digits=digits,
            digest=digest,
            truncate=truncate,
            encode_counter=encode_counter or utils.int_to_decimal_bytes,
        )

    def at(self, for_time: Instant, counter_offset: int = 0) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :param counter_offset: the amount of ticks to add to the time counter
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time) + counter_offset)

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at(self.clock())

    def remaining(self, for_time: Optional[Instant] = None) -> int:
        """
        Seconds left before the code for ``for_time`` (default: now) rolls over.
        """
        if for_time is None:
            for_time = self.clock()
        return self.interval - self._seconds(for_time) % self.interval

    def timecode(self, for_time: Instant) -> int:
        """
        Accepts either a timezone naive (`for_time.tzinfo is None`) or
        a timezone aware datetime as argument and returns the
        corresponding counter value (timecode).
        """
        return self._seconds(for_time) // self.interval

    @staticmethod
    def _seconds(for_time: Instant) -> int:
        if isinstance(for_time, datetime.datetime):
            if for_time.tzinfo:
                return int(calendar.timegm(for_time.utctimetuple()))
            return int(time.mktime(for_time.timetuple()))
        return int(for_time)


def totp(
    key: utils.BytesLike,
    step: int = DEFAULT_INTERVAL,
    digits: int = DEFAULT_DIGITS,
    clock: Optional[Clock] = None,
    engine: HashEngine = SHA1,
    truncate: Optional[Callable[[bytes, int], str]] = None,
    encode_counter: Optional[Callable[[int], bytes]] = None,
) -> str:
    """
    One-shot TOTP: HOTP over ``floor(clock() / step)``.
    """
    return TOTP(
        key,
        digits=digits,
        digest=engine,
        truncate=truncate,
        interval=step,
        clock=clock,
        encode_counter=encode_counter,
    ).now()
