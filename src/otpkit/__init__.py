from .engine import SHA1 as SHA1
from .engine import SHA256 as SHA256
from .engine import SHA512 as SHA512
from .engine import HashEngine as HashEngine
from .exceptions import InvalidCounter as InvalidCounter
from .exceptions import InvalidDigits as InvalidDigits
from .exceptions import InvalidKey as InvalidKey
from .exceptions import OTPError as OTPError
from .hotp import HOTP as HOTP
from .hotp import hotp as hotp
from .mac import hmac as hmac
from .mac import normalize_key as normalize_key
from .otp import OTP as OTP
from .totp import TOTP as TOTP
from .totp import totp as totp
from .utils import decode_base32 as decode_base32
from .utils import dynamic_truncate as dynamic_truncate
from .utils import first_bytes_truncate as first_bytes_truncate
from .utils import int_to_bytestring as int_to_bytestring
from .utils import int_to_decimal_bytes as int_to_decimal_bytes
