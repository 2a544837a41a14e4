import hashlib
import hmac
import logging
from typing import Any, Callable, Optional

from . import utils
from .exceptions import HashTooShort

logger = logging.getLogger(__name__)

KeyedHash = Callable[[bytes, bytes], bytes]


def keyed_hash(digest: Any = hashlib.sha1) -> KeyedHash:
    """
    Builds the HMAC primitive fed to :func:`generate_otp`.

    :param digest: a hashlib constructor (``hashlib.sha256``) or name (``"sha256"``)
    :returns: a function ``(key, message) -> bytes``
    """

    def _hmac(key: bytes, message: bytes) -> bytes:
        return hmac.new(key, message, digest).digest()

    return _hmac


hmac_sha1 = keyed_hash(hashlib.sha1)


def hmac_hex(secret: bytes, moving_factor: int, digest: KeyedHash = hmac_sha1) -> str:
    """
    Hex HMAC of the encoded moving factor; the intermediate value listed
    in RFC 4226 Appendix D.
    """
    return digest(utils.byte_secret(secret), utils.int_to_bytestring(moving_factor)).hex()


class Truncation(object):
    """
    Where the four code bytes are taken from in the HMAC output.

    Either dynamic (RFC 4226 section 5.3, the low nibble of the last byte
    picks the offset) or a fixed manual offset.
    """

    __slots__ = ("offset",)

    def __init__(self, offset: Optional[int] = None) -> None:
        if offset is not None and (isinstance(offset, bool) or not isinstance(offset, int) or offset < 0):
            raise ValueError("manual truncation offset must be a non-negative integer")
        object.__setattr__(self, "offset", offset)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Truncation is immutable")

    @classmethod
    def dynamic(cls) -> "Truncation":
        return cls()

    @classmethod
    def manual(cls, offset: int) -> "Truncation":
        return cls(offset)

    @property
    def is_dynamic(self) -> bool:
        return self.offset is None

    def select(self, hmac_hash: bytes) -> int:
        """
        Returns the offset of the four code bytes in ``hmac_hash``.

        A manual offset is only honoured while it is smaller than the value
        of the fourth-from-last hash byte, as in the RFC 4226 reference
        code; otherwise dynamic truncation applies.
        """
        if len(hmac_hash) < 4:
            raise HashTooShort("keyed hash returned {} bytes, at least 4 are needed".format(len(hmac_hash)))
        if self.offset is not None and self.offset < hmac_hash[-4]:
            offset = self.offset
            logger.debug("using manual truncation offset %d", offset)
        else:
            offset = hmac_hash[-1] & 0xF
            logger.debug("using dynamic truncation offset %d", offset)
        if offset + 4 > len(hmac_hash):
            raise HashTooShort(
                "truncation offset {} needs {} bytes, keyed hash returned {}".format(offset, offset + 4, len(hmac_hash))
            )
        return offset

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Truncation) and other.offset == self.offset

    def __hash__(self) -> int:
        return hash(self.offset)

    def __repr__(self) -> str:
        if self.offset is None:
            return "Truncation.dynamic()"
        return "Truncation.manual({})".format(self.offset)


DYNAMIC = Truncation.dynamic()


def generate_otp(
    secret: bytes,
    moving_factor: int,
    code_digits: int = utils.DEFAULT_DIGITS,
    truncation: Truncation = DYNAMIC,
    digest: KeyedHash = hmac_sha1,
) -> str:
    """
    Implements RFC 4226 HOTP value generation.

    :param secret: raw shared secret
    :param moving_factor: the HMAC counter value. Usually either the
        counter, or the computed integer based on the Unix timestamp
    :param code_digits: number of digits in the returned code
    :param truncation: :data:`DYNAMIC` or ``Truncation.manual(offset)``
    :param digest: keyed-hash function ``(key, message) -> bytes``
    :returns: the code, left-padded with zeros to ``code_digits``
    """
    utils.check_digits(code_digits)
    hmac_hash = bytearray(digest(utils.byte_secret(secret), utils.int_to_bytestring(moving_factor)))
    offset = truncation.select(hmac_hash)
    code = (
        (hmac_hash[offset] & 0x7F) << 24
        | (hmac_hash[offset + 1] & 0xFF) << 16
        | (hmac_hash[offset + 2] & 0xFF) << 8
        | (hmac_hash[offset + 3] & 0xFF)
    )
    return str(code % 10**code_digits).zfill(code_digits)
