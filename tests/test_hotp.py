import hashlib

import pytest

from otpcore import HOTP, InvalidDigitCount, Truncation, keyed_hash

SECRET = b"12345678901234567890"


def test_at():
    hotp = HOTP(SECRET)
    assert hotp.at(0) == "755224"
    assert hotp.at(1) == "287082"
    assert hotp.at(9) == "520489"


def test_initial_count():
    hotp = HOTP(SECRET, initial_count=5)
    assert hotp.at(0) == "254676"
    assert hotp.at(4) == "520489"


def test_digits():
    assert HOTP(SECRET, digits=8).at(1) == "94287082"


def test_manual_truncation():
    assert HOTP(SECRET, truncation=Truncation.manual(1)).at(0) == "339280"


def test_custom_digest():
    # RFC 6238 SHA-256 vector, T = 1
    hotp = HOTP(b"12345678901234567890123456789012", digits=8, digest=keyed_hash(hashlib.sha256))
    assert hotp.at(1) == "46119246"


def test_secret_is_copied():
    raw = bytearray(SECRET)
    hotp = HOTP(raw)
    raw[0] = 0
    assert hotp.secret == SECRET
    assert hotp.at(0) == "755224"


def test_invalid_digits():
    with pytest.raises(InvalidDigitCount):
        HOTP(SECRET, digits=0)


def test_repr_hides_secret():
    assert "1234" not in repr(HOTP(SECRET))
