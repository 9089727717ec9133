# Copyright the pgpsig contributors
# SPDX-License-Identifier: Apache-2.0

"""
<Module Name>
  subpackets.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Provides value classes for signature subpackets and functions to parse and
  encode single subpackets and whole subpacket areas, as described in RFC4880
  5.2.3.1. Signature Subpacket Specification.

  A subpacket consists of a length, a type octet and a payload. The length
  counts the type octet and the payload. Subpackets are dispatched on the
  whole type octet: an octet with bit 7 (the critical flag) set is never an
  assigned or reserved type, and is kept as UnknownSubpacket.

  Creation time, expiration times and issuer subpackets are decoded into
  python values. Other assigned subpacket types are kept as opaque payload
  (OpaqueSubpacket), as are types that are neither assigned nor reserved
  (UnknownSubpacket). All of them re-encode to the octets they were parsed
  from, provided the length was encoded in its shortest form.

"""
import struct
import datetime
import logging

import attr
import dateutil.tz

import pgpsig.util
import pgpsig.formats
import pgpsig.settings
from pgpsig.constants import (SubpacketType, RESERVED_SUBPACKET_TYPES,
    SUBPACKET_CRITICAL_BIT)
from pgpsig.exceptions import (TruncatedDataError, IntegerReadError,
    ReservedValueError)

log = logging.getLogger(__name__)

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=dateutil.tz.UTC)


@attr.s(frozen=True)
class Subpacket(object):
  """Base class for signature subpackets.

  Subclasses set TYPE, or override the `type_id` property, and implement
  the `payload` property.

  """
  TYPE = None

  @property
  def type_id(self):
    """The type octet of the subpacket. """
    return int(self.TYPE)

  @property
  def critical(self):
    """True if bit 7 of the type octet is set. """
    return bool(self.type_id & SUBPACKET_CRITICAL_BIT)

  @property
  def payload(self):
    """The subpacket payload octets. """
    raise NotImplementedError # pragma: no cover

  @property
  def length(self):
    """The subpacket length as declared in its header, i.e. payload length
    plus one for the type octet. """
    return 1 + len(self.payload)

  def to_bytes(self):
    """
    <Purpose>
      Encode the subpacket, i.e. length, type octet and payload.

    <Exceptions>
      pgpsig.exceptions.EncodingError
              if the subpacket length cannot be expressed.

    <Returns>
      The encoded subpacket octets.

    """
    payload = self.payload
    return (pgpsig.util.encode_subpacket_length(1 + len(payload)) +
        bytes([self.type_id]) + payload)


def _read_payload_uint(payload, size):
  """Read the integer payload of a subpacket of fixed size. """
  if len(payload) < size or (pgpsig.settings.STRICT_INTEGER_PAYLOADS and
      len(payload) != size):
    raise IntegerReadError("Expected {} octet integer subpacket payload, got "
        "{} octets".format(size, len(payload)))

  return int.from_bytes(payload[:size], "big")


@attr.s(frozen=True)
class SignatureCreationTime(Subpacket):
  """The time the signature was made (see RFC4880 5.2.3.4.).

  Attributes:
    value: A timezone aware datetime with seconds resolution.

  """
  TYPE = SubpacketType.SignatureCreationTime

  value = attr.ib()

  @value.validator
  def _validate_value(self, attribute, value): # pylint: disable=unused-argument
    pgpsig.formats._check_datetime(value) # pylint: disable=protected-access
    pgpsig.formats._check_uint32( # pylint: disable=protected-access
        (value - EPOCH) // datetime.timedelta(seconds=1))

  @classmethod
  def from_timestamp(cls, seconds):
    """Create from seconds since the epoch. """
    pgpsig.formats._check_uint32(seconds) # pylint: disable=protected-access
    return cls(EPOCH + datetime.timedelta(seconds=seconds))

  @classmethod
  def from_payload(cls, payload):
    return cls.from_timestamp(_read_payload_uint(payload, 4))

  @property
  def timestamp(self):
    """Seconds since the epoch. """
    return (self.value - EPOCH) // datetime.timedelta(seconds=1)

  @property
  def payload(self):
    return struct.pack(">I", self.timestamp)


@attr.s(frozen=True)
class _DurationSubpacket(Subpacket):
  """Base class for subpackets that encode a number of seconds relative to
  the signature or key creation time.

  Attributes:
    value: A timedelta with seconds resolution. Zero means the signature or
        key does not expire.

  """
  value = attr.ib()

  @value.validator
  def _validate_value(self, attribute, value): # pylint: disable=unused-argument
    pgpsig.formats._check_timedelta(value) # pylint: disable=protected-access

  @classmethod
  def from_seconds(cls, seconds):
    pgpsig.formats._check_uint32(seconds) # pylint: disable=protected-access
    return cls(datetime.timedelta(seconds=seconds))

  @classmethod
  def from_payload(cls, payload):
    return cls.from_seconds(_read_payload_uint(payload, 4))

  @property
  def seconds(self):
    return int(self.value.total_seconds())

  @property
  def payload(self):
    return struct.pack(">I", self.seconds)


@attr.s(frozen=True)
class SignatureExpirationTime(_DurationSubpacket):
  """Validity period of the signature (see RFC4880 5.2.3.10.). """
  TYPE = SubpacketType.SignatureExpirationTime


@attr.s(frozen=True)
class KeyExpirationTime(_DurationSubpacket):
  """Validity period of the key (see RFC4880 5.2.3.6.). """
  TYPE = SubpacketType.KeyExpirationTime


@attr.s(frozen=True)
class Issuer(Subpacket):
  """The 64-bit key id of the key issuing the signature (see RFC4880
  5.2.3.5.).

  Attributes:
    value: The key id as integer.

  """
  TYPE = SubpacketType.Issuer

  value = attr.ib()

  @value.validator
  def _validate_value(self, attribute, value): # pylint: disable=unused-argument
    pgpsig.formats._check_uint64(value) # pylint: disable=protected-access

  @classmethod
  def from_keyid(cls, keyid):
    """Create from a 16 character hex key id. """
    pgpsig.formats._check_keyid(keyid) # pylint: disable=protected-access
    return cls(int(keyid, 16))

  @classmethod
  def from_payload(cls, payload):
    return cls(_read_payload_uint(payload, 8))

  @property
  def keyid(self):
    """The key id as lower case hex string. """
    return "{:016x}".format(self.value)

  @property
  def payload(self):
    return struct.pack(">Q", self.value)


@attr.s(frozen=True)
class OpaqueSubpacket(Subpacket):
  """An assigned subpacket type whose payload we do not interpret, e.g. key
  flags or notation data.

  Attributes:
    subpacket_type: A pgpsig.constants.SubpacketType member.

    data: The raw payload.

  """
  subpacket_type = attr.ib(converter=SubpacketType)
  data = attr.ib(converter=bytes)

  @property
  def type_id(self):
    return int(self.subpacket_type)

  @property
  def payload(self):
    return self.data


@attr.s(frozen=True)
class UnknownSubpacket(Subpacket):
  """A subpacket type that is neither assigned nor reserved in RFC4880.

  Attributes:
    tag: The whole type octet, including bit 7.

    data: The raw payload.

  """
  tag = attr.ib()
  data = attr.ib(converter=bytes)

  @tag.validator
  def _validate_tag(self, attribute, value): # pylint: disable=unused-argument
    if not isinstance(value, int) or value < 0 or value > 0xFF:
      raise pgpsig.formats._err(value, # pylint: disable=protected-access
          "int in range 0 to 255")

    if value in RESERVED_SUBPACKET_TYPES:
      raise ReservedValueError("Subpacket type '{}' is reserved".format(value))

  @property
  def type_id(self):
    return self.tag

  @property
  def payload(self):
    return self.data


# Subpacket types that are decoded into python values
SUBPACKET_CLASSES = {
  SubpacketType.SignatureCreationTime: SignatureCreationTime,
  SubpacketType.SignatureExpirationTime: SignatureExpirationTime,
  SubpacketType.KeyExpirationTime: KeyExpirationTime,
  SubpacketType.Issuer: Issuer,
}

_ASSIGNED_SUBPACKET_TYPES = frozenset(int(t) for t in SubpacketType)


def parse_subpacket(data, position=0):
  """
  <Purpose>
    Parse the subpacket starting at `position` in `data`.

  <Arguments>
    data:
            A subpacket area.

    position: (optional)
            Offset of the subpacket in data.

  <Exceptions>
    pgpsig.exceptions.TruncatedDataError
            if the subpacket is incomplete, or its length is 0, which leaves
            no room for the type octet.

    pgpsig.exceptions.IntegerReadError
            if the payload of an integer subpacket has the wrong size.

    pgpsig.exceptions.ReservedValueError
            if the subpacket type is reserved.

  <Side Effects>
    None.

  <Returns>
    A tuple of the parsed Subpacket and the number of octets it occupies.

  """
  length, length_len = pgpsig.util.parse_subpacket_length(data, position)
  if length == 0:
    raise TruncatedDataError("Subpacket at position {} has length 0, which "
        "leaves no room for the type octet".format(position))

  type_id = pgpsig.util.read_uint(data, position + length_len, 1)
  payload_start = position + length_len + 1
  payload = bytes(data[payload_start:payload_start + length - 1])
  if len(payload) != length - 1:
    raise TruncatedDataError("Subpacket at position {} declares {} payload "
        "octets, but only {} are available".format(position, length - 1,
        len(payload)))

  if type_id in RESERVED_SUBPACKET_TYPES:
    raise ReservedValueError("Subpacket type '{}' at position {} is reserved "
        "(see RFC4880 5.2.3.1.)".format(type_id, position))

  if type_id in SUBPACKET_CLASSES:
    subpacket = SUBPACKET_CLASSES[type_id].from_payload(payload)

  elif type_id in _ASSIGNED_SUBPACKET_TYPES:
    subpacket = OpaqueSubpacket(type_id, payload)

  else:
    log.debug("Preserving unknown subpacket type '{}' ({} octets)".format(
        type_id, length))
    subpacket = UnknownSubpacket(type_id, payload)

  return subpacket, length_len + length


def parse_subpackets(data):
  """
  <Purpose>
    parse the subpackets of a hashed or unhashed subpacket area

  <Arguments>
    data: the unparsed subpacket octets

  <Exceptions>
    pgpsig.exceptions.PacketParsingError (or subclass) if any subpacket is
    incomplete or malformed, see parse_subpacket.

  <Side Effects>
    None

  <Returns>
    A list of Subpacket objects in the order they appear in data. An empty
    area yields an empty list.
  """
  parsed_subpackets = []
  position = 0

  while position < len(data):
    subpacket, subpacket_len = parse_subpacket(data, position)
    parsed_subpackets.append(subpacket)
    position += subpacket_len

  return parsed_subpackets


def encode_subpackets(subpackets):
  """Encode the passed Subpacket objects as subpacket area. """
  return b"".join(subpacket.to_bytes() for subpacket in subpackets)


def find_subpacket(subpackets, subpacket_class):
  """Return the first subpacket of the passed class or None. """
  for subpacket in subpackets:
    if isinstance(subpacket, subpacket_class):
      return subpacket

  return None
