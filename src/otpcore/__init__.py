import logging

from . import utils
from .exceptions import HashTooShort as HashTooShort
from .exceptions import InvalidDigitCount as InvalidDigitCount
from .exceptions import InvalidTimeStep as InvalidTimeStep
from .exceptions import OTPError as OTPError
from .exceptions import SecretDecodeError as SecretDecodeError
from .hotp import HOTP as HOTP
from .otp import DYNAMIC as DYNAMIC
from .otp import KeyedHash
from .otp import Truncation as Truncation
from .otp import generate_otp as generate_otp
from .otp import hmac_sha1 as hmac_sha1
from .otp import keyed_hash as keyed_hash
from .totp import TOTP as TOTP

logging.getLogger(__name__).addHandler(logging.NullHandler())


def google_authenticator(
    secret: str,
    time_step: int = utils.DEFAULT_TIME_STEP,
    code_digits: int = utils.DEFAULT_DIGITS,
    digest: KeyedHash = hmac_sha1,
) -> TOTP:
    """
    Builds a TOTP handler from a Base32 secret as displayed by Google
    Authenticator and similar apps.

    Spaces and lower case are accepted: ``"jbsw Y3Dp EhPk 3pXp"`` and
    ``"JBSWY3DPEHPK3PXP"`` give the same handler.

    :param secret: Base32 encoded secret
    :param time_step: the time window width in seconds
    :param code_digits: number of integers in each OTP
    :param digest: keyed-hash function, HMAC-SHA1 unless set
    :raises SecretDecodeError: if ``secret`` is not valid Base32
    :returns: TOTP over the decoded secret
    """
    return TOTP(utils.decode_base32_secret(secret), time_step=time_step, code_digits=code_digits, digest=digest)
