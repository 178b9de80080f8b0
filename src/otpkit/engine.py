import hashlib
from typing import Any


class HashEngine(object):
    """
    A fixed-output cryptographic hash together with its block size.

    Wraps a hashlib-style constructor so HMAC can ask for ``block_size``
    and ``digest_size`` without knowing which algorithm sits underneath.
    """

    def __init__(self, digest: Any = hashlib.sha1) -> None:
        """
        :param digest: hashlib constructor, e.g. ``hashlib.sha256``
        """
        probe = digest()
        # shake_* report digest_size 0 and need an explicit length
        if probe.digest_size <= 0:
            raise ValueError("selected digest function must produce a fixed-length digest")
        self.digest = digest
        self.name = probe.name
        self.digest_size = probe.digest_size
        self.block_size = probe.block_size

    def __call__(self, data: bytes) -> bytes:
        return self.digest(data).digest()

    def __repr__(self) -> str:
        return "HashEngine({0})".format(self.name)


SHA1 = HashEngine(hashlib.sha1)
SHA256 = HashEngine(hashlib.sha256)
SHA512 = HashEngine(hashlib.sha512)
