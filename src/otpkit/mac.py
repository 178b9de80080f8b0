"""
HMAC (RFC 2104) over a :class:`~otpkit.engine.HashEngine`.

    HMAC(K, m) = H((K' ^ opad) || H((K' ^ ipad) || m))

where K' is the key brought to exactly one block: hashed first when it is
longer than a block, then right-padded with zero bytes.
"""
from .engine import SHA1, HashEngine
from .utils import BytesLike, as_key, pad_right, xor_bytes

OPAD_BYTE = 0x5C
IPAD_BYTE = 0x36


def normalize_key(key: BytesLike, engine: HashEngine = SHA1) -> bytes:
    """
    Brings ``key`` to exactly ``engine.block_size`` bytes.

    A key that is already one block long comes back unchanged, so the
    operation is idempotent.

    :param key: secret of any length, including empty
    :param engine: hash whose block size to normalize to
    :returns: block-sized key
    """
    key = as_key(key)
    blocksize = engine.block_size
    if len(key) > blocksize:
        key = engine(key)
    return pad_right(key, blocksize)


def hmac(key: BytesLike, message: BytesLike, engine: HashEngine = SHA1) -> bytes:
    """
    Computes the HMAC tag of ``message`` under ``key``.

    Total over byte inputs: empty keys and empty messages are fine.

    :param key: secret of any length
    :param message: data to authenticate
    :param engine: hash to build the MAC on, SHA-1 by default
    :returns: tag of ``engine.digest_size`` bytes
    """
    if not isinstance(message, (bytes, bytearray, memoryview)):
        raise TypeError("message must be a byte sequence, got {0}".format(type(message).__name__))

    k = normalize_key(key, engine)
    opad = bytes([OPAD_BYTE]) * engine.block_size
    ipad = bytes([IPAD_BYTE]) * engine.block_size

    inner = engine(xor_bytes(k, ipad) + bytes(message))
    return engine(xor_bytes(k, opad) + inner)
