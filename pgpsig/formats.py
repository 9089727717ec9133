# Copyright the pgpsig contributors
# SPDX-License-Identifier: Apache-2.0

"""
<Program Name>
  formats.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Helpers to validate API inputs and value objects before they are encoded.

"""
import inspect
import datetime
from re import fullmatch

from securesystemslib.exceptions import FormatError

MAX_UINT32 = 0xFFFFFFFF
MAX_UINT64 = 0xFFFFFFFFFFFFFFFF


class ValidationMixin:
  """The validation mixin provides a self-inspecting method, validate, to
  allow value objects to check that they are proper."""

  def validate(self):
    """Validates attributes of the instance.

    Raises:
      securesystemslib.exceptions.FormatError: An attribute value is invalid.

    """
    # Inspect the class, so that properties are not evaluated before the
    # attributes they depend on are validated
    for name, method in inspect.getmembers(type(self),
        predicate=inspect.isfunction):
      if name.startswith("_validate_"):
        method(self)


def _err(arg, expected):
  return FormatError("expected {}, got '{} ({})'".format(
      expected, arg, type(arg)))


def _check_int(arg):
  # bool is an int subclass, but never a valid field value
  if not isinstance(arg, int) or isinstance(arg, bool):
    raise _err(arg, "int")


def _check_uint(arg, maximum):
  _check_int(arg)
  if arg < 0 or arg > maximum:
    raise _err(arg, "int in range 0 to {}".format(maximum))


def _check_uint8(arg):
  _check_uint(arg, 0xFF)


def _check_uint32(arg):
  _check_uint(arg, MAX_UINT32)


def _check_uint64(arg):
  _check_uint(arg, MAX_UINT64)


def _check_keyid(arg):
  """Check 16 character hex key id. """
  if not isinstance(arg, str) or fullmatch(r"^[0-9a-fA-F]{16}$", arg) is None:
    raise _err(arg, "16 character hex key id")


def _check_datetime(arg):
  """Check timezone aware datetime with seconds resolution. """
  if not isinstance(arg, datetime.datetime) or arg.tzinfo is None or \
      arg.microsecond:
    raise _err(arg, "timezone aware datetime of whole seconds")


def _check_timedelta(arg):
  """Check non-negative timedelta of whole seconds fitting in 32 bits. """
  if not isinstance(arg, datetime.timedelta):
    raise _err(arg, "timedelta")

  if arg.microseconds or arg < datetime.timedelta(0) or \
      arg.total_seconds() > MAX_UINT32:
    raise _err(arg, "timedelta of 0 to {} whole seconds".format(MAX_UINT32))


def _check_subpacket_list(arg):
  # Imported here, pgpsig.subpackets uses this module
  from pgpsig.subpackets import Subpacket # pylint: disable=import-outside-toplevel
  if not isinstance(arg, (list, tuple)):
    raise _err(arg, "list of subpackets")
  for e in arg:
    if not isinstance(e, Subpacket):
      raise _err(e, "subpacket")
