"""
<Program Name>
  test_formats.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Test validation helpers in pgpsig/formats.py.

"""
import datetime
import unittest

import attr
import dateutil.tz

from securesystemslib.exceptions import FormatError

import pgpsig.formats
from pgpsig.subpackets import Issuer

# pylint: disable=protected-access


@attr.s
class _Validated(pgpsig.formats.ValidationMixin):
  value = attr.ib()

  def __attrs_post_init__(self):
    self.validate()

  @property
  def doubled(self):
    return self.value * 2

  def _validate_value(self):
    pgpsig.formats._check_uint8(self.value)


class TestValidationMixin(unittest.TestCase):
  def test_validate(self):
    self.assertEqual(_Validated(5).doubled, 10)

    with self.assertRaises(FormatError):
      _Validated(256)

    validated = _Validated(1)
    validated.value = "x"
    with self.assertRaises(FormatError):
      validated.validate()


class TestChecks(unittest.TestCase):
  def test_check_int(self):
    pgpsig.formats._check_int(-5)
    for value in [True, 1.0, "1", None]:
      with self.assertRaises(FormatError):
        pgpsig.formats._check_int(value)

  def test_check_uint(self):
    pgpsig.formats._check_uint8(0)
    pgpsig.formats._check_uint8(255)
    pgpsig.formats._check_uint32(0xFFFFFFFF)
    pgpsig.formats._check_uint64(0xFFFFFFFFFFFFFFFF)

    for check, value in [(pgpsig.formats._check_uint8, 256),
        (pgpsig.formats._check_uint8, -1),
        (pgpsig.formats._check_uint32, 0x100000000),
        (pgpsig.formats._check_uint64, 1 << 64)]:
      with self.assertRaises(FormatError):
        check(value)

  def test_check_keyid(self):
    pgpsig.formats._check_keyid("0123456789abcdef")
    pgpsig.formats._check_keyid("0123456789ABCDEF")
    for value in ["0123456789abcde", "0123456789abcdef0", "0x23456789abcdef",
        None]:
      with self.assertRaises(FormatError):
        pgpsig.formats._check_keyid(value)

  def test_check_datetime(self):
    pgpsig.formats._check_datetime(
        datetime.datetime(2020, 1, 1, tzinfo=dateutil.tz.UTC))
    pgpsig.formats._check_datetime(
        datetime.datetime(2020, 1, 1, tzinfo=dateutil.tz.tzoffset(None, 3600)))

    for value in [datetime.datetime(2020, 1, 1),
        datetime.datetime(2020, 1, 1, microsecond=1, tzinfo=dateutil.tz.UTC),
        "2020-01-01T00:00:00Z"]:
      with self.assertRaises(FormatError):
        pgpsig.formats._check_datetime(value)

  def test_check_timedelta(self):
    pgpsig.formats._check_timedelta(datetime.timedelta(0))
    pgpsig.formats._check_timedelta(datetime.timedelta(seconds=0xFFFFFFFF))
    for value in [datetime.timedelta(seconds=-1),
        datetime.timedelta(microseconds=1), 60]:
      with self.assertRaises(FormatError):
        pgpsig.formats._check_timedelta(value)

  def test_check_subpacket_list(self):
    pgpsig.formats._check_subpacket_list([])
    pgpsig.formats._check_subpacket_list((Issuer(1),))
    for value in [Issuer(1), [b"\x02\x1b\x03"], None]:
      with self.assertRaises(FormatError):
        pgpsig.formats._check_subpacket_list(value)


if __name__ == "__main__":
  unittest.main()
