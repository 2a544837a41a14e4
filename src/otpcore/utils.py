import base64
import struct
from typing import Union

from .exceptions import InvalidDigitCount, InvalidTimeStep, SecretDecodeError

DEFAULT_DIGITS = 6
DEFAULT_TIME_STEP = 30
BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def int_to_bytestring(i: int) -> bytes:
    """
    Turns an integer moving factor into the 8-byte big-endian string that
    is fed to the HMAC along with the secret.

    Negative values wrap around at 64 bits, so -1 encodes as eight 0xFF
    bytes. Values that need more than 64 bits are rejected.

    >>> int_to_bytestring(1)
    b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x01'
    """
    if not -(1 << 63) <= i <= UINT64_MASK:
        raise ValueError("moving factor must fit in 64 bits")
    return struct.pack(">Q", i & UINT64_MASK)


def byte_secret(secret: Union[bytes, bytearray]) -> bytes:
    """
    Validates a raw shared secret and returns an immutable copy of it.
    """
    if not isinstance(secret, (bytes, bytearray)):
        raise TypeError("secret must be bytes, decode Base32 secrets with decode_base32_secret()")
    if len(secret) < 1:
        raise ValueError("secret must be at least one byte long")
    return bytes(secret)


def decode_base32_secret(secret: str) -> bytes:
    """
    Converts a Base32 secret, as shown by authenticator apps, into raw bytes.

    Spaces are removed and the text is upper-cased before decoding. The
    otpauth scheme drops the ``=`` padding, so it is restored here.

    :param secret: Base32 text, e.g. ``"JBSW Y3DP EHPK 3PXP"``
    :raises SecretDecodeError: if the text is not valid RFC 4648 Base32
    """
    normalized = secret.replace(" ", "").upper()
    missing_padding = len(normalized) % 8
    if missing_padding != 0:
        normalized += "=" * (8 - missing_padding)
    try:
        decoded = base64.b32decode(normalized)
    except ValueError as err:
        raise SecretDecodeError("invalid Base32 secret: {}".format(err)) from err
    if not decoded:
        raise SecretDecodeError("Base32 secret decodes to an empty key")
    return decoded


def check_digits(code_digits: int) -> int:
    # bool is an int subclass
    if isinstance(code_digits, bool) or not isinstance(code_digits, int) or code_digits < 1:
        raise InvalidDigitCount("code_digits must be a positive integer, got {!r}".format(code_digits))
    return code_digits


def check_time_step(time_step: int) -> int:
    if isinstance(time_step, bool) or not isinstance(time_step, int) or time_step <= 0:
        raise InvalidTimeStep("time_step must be a positive number of seconds, got {!r}".format(time_step))
    return time_step
