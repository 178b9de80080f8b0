class OTPError(ValueError):
    """
    Base class for errors raised while computing a one-time password.
    """


class InvalidDigits(OTPError):
    """
    The requested code length is not positive or exceeds what the truncation can produce.
    """


class InvalidKey(OTPError):
    """
    The secret is not a byte sequence, or a text secret could not be decoded.
    """


class InvalidCounter(OTPError):
    """
    The moving factor is negative or of an unsupported type.
    """
