class OTPError(ValueError):
    """
    Base class for errors raised while generating one-time passwords.
    """


class InvalidDigitCount(OTPError):
    """
    The requested code length is not a positive integer.
    """


class InvalidTimeStep(OTPError):
    """
    The TOTP time step is not a positive integer number of seconds.
    """


class HashTooShort(OTPError):
    """
    The keyed-hash output cannot supply four bytes at the selected offset.
    """


class SecretDecodeError(OTPError):
    """
    A Base32 secret could not be decoded.
    """
