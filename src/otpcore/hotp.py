from typing import Union

from . import utils
from .otp import DYNAMIC, KeyedHash, Truncation, generate_otp, hmac_sha1


class HOTP(object):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(
        self,
        secret: Union[bytes, bytearray],
        digits: int = utils.DEFAULT_DIGITS,
        digest: KeyedHash = hmac_sha1,
        initial_count: int = 0,
        truncation: Truncation = DYNAMIC,
    ) -> None:
        """
        :param secret: raw secret bytes (see :func:`otpcore.utils.decode_base32_secret`)
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param digest: keyed-hash function used in place of HMAC-SHA1
        :param initial_count: starting HMAC counter value, defaults to 0
        :param truncation: truncation offset choice, dynamic unless set
        """
        self.secret = utils.byte_secret(secret)
        self.digits = utils.check_digits(digits)
        self.digest = digest
        self.initial_count = initial_count
        self.truncation = truncation

    def at(self, count: int) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return generate_otp(
            self.secret,
            self.initial_count + count,
            code_digits=self.digits,
            truncation=self.truncation,
            digest=self.digest,
        )

    def __repr__(self) -> str:
        return "HOTP(digits={}, initial_count={}, truncation={!r})".format(
            self.digits, self.initial_count, self.truncation
        )
