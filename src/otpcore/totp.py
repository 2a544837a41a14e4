import calendar
import datetime
import logging
import time
from typing import Callable, List, Optional, Union

from . import utils
from .otp import DYNAMIC, KeyedHash, generate_otp, hmac_sha1

logger = logging.getLogger(__name__)

Generator = Callable[..., str]


class TOTP(object):
    """
    Handler for time-based OTP counters.

    Codes are produced for the previous, current and next time window so a
    verifier can absorb a bounded clock drift by testing membership.
    """

    def __init__(
        self,
        secret: Union[bytes, bytearray],
        time_step: int = utils.DEFAULT_TIME_STEP,
        code_digits: int = utils.DEFAULT_DIGITS,
        digest: KeyedHash = hmac_sha1,
        hotp: Generator = generate_otp,
    ) -> None:
        """
        :param secret: raw secret bytes
        :param time_step: the time window width in seconds
        :param code_digits: number of integers in each OTP
        :param digest: keyed-hash function, HMAC-SHA1 unless set
        :param hotp: counter-based generator with the signature of
            :func:`otpcore.otp.generate_otp`
        """
        self.secret = utils.byte_secret(secret)
        self.time_step = utils.check_time_step(time_step)
        self.code_digits = utils.check_digits(code_digits)
        self.digest = digest
        self.hotp = hotp

    def timecode(self, for_time: Union[int, float, datetime.datetime]) -> int:
        """
        Maps a point in time to its moving factor, ``floor(t / time_step)``.

        Naive datetimes are read as local time, like ``time.mktime``.
        """
        if isinstance(for_time, datetime.datetime):
            if for_time.tzinfo:
                seconds = calendar.timegm(for_time.utctimetuple())
            else:
                seconds = int(time.mktime(for_time.timetuple()))
        else:
            seconds = int(for_time // 1)
        return seconds // self.time_step

    def generate_otp(
        self,
        for_time: Optional[Union[int, float, datetime.datetime]] = None,
        code_digits: Optional[int] = None,
    ) -> List[str]:
        """
        Generates the codes for the window containing ``for_time`` and its
        two neighbours.

        :param for_time: the time to generate the codes for, defaults to now
        :param code_digits: overrides the configured number of digits
        :returns: ``[previous, current, next]``
        """
        if for_time is None:
            for_time = time.time()
        if code_digits is None:
            code_digits = self.code_digits
        utils.check_digits(code_digits)
        counter = self.timecode(for_time)
        logger.debug("time %s with step %ds maps to counter %d", for_time, self.time_step, counter)
        # neighbours wrap at 64 bits, counter - 1 at t = 0 encodes as 2**64 - 1
        return [
            self.hotp(
                self.secret,
                (counter + skew) & utils.UINT64_MASK,
                code_digits=code_digits,
                truncation=DYNAMIC,
                digest=self.digest,
            )
            for skew in (-1, 0, 1)
        ]

    def now(self) -> str:
        """
        Generates the code for the current time window only.
        """
        return self.generate_otp()[1]

    def __repr__(self) -> str:
        return "TOTP(time_step={}, code_digits={})".format(self.time_step, self.code_digits)
