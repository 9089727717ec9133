# Copyright the pgpsig contributors
# SPDX-License-Identifier: Apache-2.0

"""
<Module Name>
  packet.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Provides the SignaturePacket class and functions to parse and encode
  version 3 and version 4 signature packet bodies (see RFC4880 5.2.), and to
  interpret their signature value with the algorithm-specific handlers.

  NOTE: A subpacket may be found either in the hashed or unhashed subpacket
  sections of a version 4 signature. If a subpacket is not hashed, then the
  information in it cannot be considered definitive because it is not part
  of the signature proper (see RFC4880 5.2.3.2.). Signature creation time and
  issuer are hence taken from the hashed section, and only from the unhashed
  section if the hashed section does not have them.

"""
import struct
import binascii
import datetime
import logging

import attr
import dateutil.tz

import pgpsig.util
import pgpsig.rsa
import pgpsig.dsa
import pgpsig.formats
import pgpsig.subpackets
from pgpsig.algorithms import PublicKeyAlgorithm, HashAlgorithm
from pgpsig.constants import (SignatureType, PACKET_TYPE_SIGNATURE,
    SIGNATURE_PACKET_VERSION_3, SIGNATURE_PACKET_VERSION_4,
    V3_HASHED_MATERIAL_LENGTH, SIGNATURE_HANDLERS)
from pgpsig.exceptions import (PacketParsingError, TruncatedDataError,
    PacketVersionNotSupportedError, EncodingError)
from pgpsig.rsa import RsaSignature
from pgpsig.dsa import DsaSignature
from pgpsig.subpackets import SignatureCreationTime, Issuer

log = logging.getLogger(__name__)

SUPPORTED_SIGNATURE_PACKET_VERSIONS = {SIGNATURE_PACKET_VERSION_3,
    SIGNATURE_PACKET_VERSION_4}

# Subpacket areas are prefixed with a two-octet length
MAX_SUBPACKET_AREA_LENGTH = 0xFFFF

HASH_PREFIX_LENGTH = 2


@attr.s(frozen=True)
class OpaqueSignature(object):
  """The signature value of a signature made with an algorithm we do not
  interpret.

  Attributes:
    data: The raw signature value octets.

  """
  data = attr.ib(converter=bytes)


@attr.s(repr=False)
class SignaturePacket(pgpsig.formats.ValidationMixin):
  """A decoded version 3 or version 4 signature packet body.

  SignaturePacket objects are usually created with `from_bytes` or
  `from_packet`. They are not modified after creation, except for the
  signature value, which can be replaced with `set_signature_value`.

  Attributes:
    version: 3 or 4.

    signature_type_id: The signature type octet. See `signature_type`.

    pubkey_algorithm_id: The public-key algorithm octet. See
        `pubkey_algorithm`.

    hash_algorithm_id: The hash algorithm octet. See `hash_algorithm`.

    timestamp: The signature creation time as timezone aware datetime. Always
        set for version 3 signatures. For version 4 signatures it is taken
        from the first creation time subpacket of the hashed, or else the
        unhashed section, and may be None.

    signer: The 64-bit key id of the issuer as integer. Like timestamp, but
        taken from issuer subpackets for version 4 signatures.

    hashed_subpackets: A tuple of Subpacket objects, always empty for
        version 3 signatures.

    unhashed_subpackets: A tuple of Subpacket objects, always empty for
        version 3 signatures.

    hash_prefix: The left 16 bits of the signed hash value.

    signature_contents: The raw signature value octets. See
        `get_signature_value`.

  """
  version = attr.ib()
  signature_type_id = attr.ib()
  pubkey_algorithm_id = attr.ib()
  hash_algorithm_id = attr.ib()
  timestamp = attr.ib(default=None)
  signer = attr.ib(default=None)
  hashed_subpackets = attr.ib(default=(), converter=tuple)
  unhashed_subpackets = attr.ib(default=(), converter=tuple)
  hash_prefix = attr.ib(default=b"\x00\x00", converter=bytes)
  signature_contents = attr.ib(default=b"", converter=bytes)

  def __attrs_post_init__(self):
    self.validate()

  def __repr__(self):
    return "<SignaturePacket v{} {} {}/{} signer={}>".format(self.version,
        self.signature_type.name, self.pubkey_algorithm.name,
        self.hash_algorithm.name,
        None if self.signer is None else "{:016x}".format(self.signer))

  @property
  def signature_type(self):
    """A pgpsig.constants.SignatureType member. """
    return SignatureType(self.signature_type_id)

  @property
  def pubkey_algorithm(self):
    """A pgpsig.algorithms.PublicKeyAlgorithm member. """
    return PublicKeyAlgorithm.from_id(self.pubkey_algorithm_id)

  @property
  def hash_algorithm(self):
    """A pgpsig.algorithms.HashAlgorithm member. """
    return HashAlgorithm.from_id(self.hash_algorithm_id)

  @staticmethod
  def from_bytes(data):
    """Creates a SignaturePacket from a signature packet body. See
    `parse_signature_packet`. """
    return parse_signature_packet(data)

  @staticmethod
  def from_packet(data):
    """
    <Purpose>
      Creates a SignaturePacket from a complete signature packet, i.e. packet
      header and body.

    <Arguments>
      data:
              An RFC4880 signature packet as described in section 4.2 of the
              rfc. Octets after the packet are ignored.

    <Exceptions>
      pgpsig.exceptions.PacketParsingError (or subclass)
              if the packet header is malformed, the packet is not a
              signature packet, or the body cannot be parsed.

    <Returns>
      A SignaturePacket.

    """
    _, header_len, body_len, packet_len = pgpsig.util.parse_packet_header(
        data, PACKET_TYPE_SIGNATURE)

    body = data[header_len:packet_len]
    if len(body) != body_len:
      raise TruncatedDataError("Signature packet declares {} body octets, but "
          "only {} are available".format(body_len, len(body)))

    return parse_signature_packet(body)

  def get_signature_value(self):
    """
    <Purpose>
      Interpret the signature value octets according to the public-key
      algorithm: one MPI for RSA (sign and/or encrypt), two MPIs r and s for
      DSA, opaque octets for any other algorithm.

    <Exceptions>
      pgpsig.exceptions.TruncatedDataError
              if an MPI is incomplete.

    <Returns>
      A pgpsig.rsa.RsaSignature, pgpsig.dsa.DsaSignature or OpaqueSignature.

    """
    handler = SIGNATURE_HANDLERS.get(self.pubkey_algorithm)
    if handler is None:
      log.debug("Keeping signature value of public-key algorithm '{}' "
          "opaque".format(self.pubkey_algorithm_id))
      return OpaqueSignature(self.signature_contents)

    return handler.get_signature_params(self.signature_contents)

  def set_signature_value(self, value):
    """
    <Purpose>
      Replace the signature value octets with the encoding of the passed
      signature value.

    <Arguments>
      value:
              A pgpsig.rsa.RsaSignature, pgpsig.dsa.DsaSignature or
              OpaqueSignature.

    <Exceptions>
      securesystemslib.exceptions.FormatError
              if value is none of the above.

      pgpsig.exceptions.EncodingError
              if an integer cannot be encoded as MPI.

    <Side Effects>
      Modifies signature_contents.

    """
    if isinstance(value, RsaSignature):
      contents = pgpsig.rsa.encode_signature_params(value)

    elif isinstance(value, DsaSignature):
      contents = pgpsig.dsa.encode_signature_params(value)

    elif isinstance(value, OpaqueSignature):
      contents = value.data

    else:
      raise pgpsig.formats._err(value, # pylint: disable=protected-access
          "RsaSignature, DsaSignature or OpaqueSignature")

    self.signature_contents = contents

  def hashed_header(self):
    """
    <Purpose>
      Return the packet octets that are hashed together with the signed
      content, i.e. signature type and creation time for version 3, and
      version up to and including the hashed subpackets for version 4
      signatures (see RFC4880 5.2.4.).

    <Exceptions>
      pgpsig.exceptions.EncodingError
              if the hashed subpackets exceed the maximum area length, or a
              version 3 packet lacks the timestamp.

    """
    if self.version == SIGNATURE_PACKET_VERSION_3:
      if self.timestamp is None:
        raise EncodingError("Version 3 signature packets require timestamp")

      return bytes([self.signature_type_id]) + struct.pack(">I",
          _to_seconds(self.timestamp))

    hashed_area = _encode_subpacket_area(self.hashed_subpackets, "hashed")
    return bytes([self.version, self.signature_type_id,
        self.pubkey_algorithm_id, self.hash_algorithm_id]) + hashed_area

  def compute_digest(self, content):
    """
    <Purpose>
      Hash data prior to signature verification in conformance of the
      RFC4880 openPGP standard (see section 5.2.4.).

    <Arguments>
      content:
              The signed content, e.g. the document for binary signatures.

    <Exceptions>
      pgpsig.exceptions.UnknownAlgorithmError
              if the hash algorithm is unknown.

    <Returns>
      The digest over content and signature headers.

    """
    headers = self.hashed_header()
    hashed_data = bytes(content) + headers

    if self.version == SIGNATURE_PACKET_VERSION_4:
      # As per RFC4880 Section 5.2.4., version 4 signatures hash a very
      # opinionated trailing header
      hashed_data += b"\x04\xff" + struct.pack(">I", len(headers))

    return self.hash_algorithm.digest(hashed_data)

  def check_hash_prefix(self, content):
    """Return True if the left 16 bits of the digest of content match
    `hash_prefix`, which allows rejecting signatures early. """
    return self.compute_digest(content)[:HASH_PREFIX_LENGTH] == \
        self.hash_prefix

  def to_bytes(self):
    """
    <Purpose>
      Encode the packet as signature packet body (without packet header).

    <Exceptions>
      pgpsig.exceptions.EncodingError
              if a subpacket area exceeds 65535 octets, or a version 3
              packet lacks timestamp or signer.

    <Returns>
      The encoded packet body.

    """
    if self.version == SIGNATURE_PACKET_VERSION_3:
      if self.timestamp is None or self.signer is None:
        raise EncodingError("Version 3 signature packets require timestamp "
            "and signer")

      return (bytes([SIGNATURE_PACKET_VERSION_3, V3_HASHED_MATERIAL_LENGTH]) +
          self.hashed_header() + struct.pack(">Q", self.signer) +
          bytes([self.pubkey_algorithm_id, self.hash_algorithm_id]) +
          self.hash_prefix + self.signature_contents)

    return (self.hashed_header() +
        _encode_subpacket_area(self.unhashed_subpackets, "unhashed") +
        self.hash_prefix + self.signature_contents)

  def to_dict(self):
    """Returns a JSON-friendly dictionary summary of the packet. """
    def _subpacket_dict(subpacket):
      return {
        "type": subpacket.type_id,
        "critical": subpacket.critical,
        "payload": binascii.hexlify(subpacket.payload).decode("ascii"),
      }

    return {
      "version": self.version,
      "signature_type": self.signature_type.name,
      "pubkey_algorithm": self.pubkey_algorithm.name,
      "hash_algorithm": self.hash_algorithm.name,
      "timestamp": None if self.timestamp is None else
          self.timestamp.astimezone(dateutil.tz.UTC).strftime(
          "%Y-%m-%dT%H:%M:%SZ"),
      "signer": None if self.signer is None else
          "{:016x}".format(self.signer),
      "hashed_subpackets": [_subpacket_dict(s) for s in
          self.hashed_subpackets],
      "unhashed_subpackets": [_subpacket_dict(s) for s in
          self.unhashed_subpackets],
      "hash_prefix": binascii.hexlify(self.hash_prefix).decode("ascii"),
      "signature": binascii.hexlify(self.signature_contents).decode("ascii"),
    }

  def _validate_version(self):
    if self.version not in SUPPORTED_SIGNATURE_PACKET_VERSIONS:
      raise pgpsig.formats._err(self.version, # pylint: disable=protected-access
          "signature packet version 3 or 4")

  def _validate_ids(self):
    for value in [self.signature_type_id, self.pubkey_algorithm_id,
        self.hash_algorithm_id]:
      pgpsig.formats._check_uint8(value) # pylint: disable=protected-access

  def _validate_timestamp(self):
    if self.timestamp is not None:
      pgpsig.formats._check_datetime(self.timestamp) # pylint: disable=protected-access

  def _validate_signer(self):
    if self.signer is not None:
      pgpsig.formats._check_uint64(self.signer) # pylint: disable=protected-access

  def _validate_subpackets(self):
    pgpsig.formats._check_subpacket_list( # pylint: disable=protected-access
        self.hashed_subpackets)
    pgpsig.formats._check_subpacket_list( # pylint: disable=protected-access
        self.unhashed_subpackets)

    if self.version == SIGNATURE_PACKET_VERSION_3 and (
        self.hashed_subpackets or self.unhashed_subpackets):
      raise pgpsig.formats._err( # pylint: disable=protected-access
          self.hashed_subpackets + self.unhashed_subpackets,
          "no subpackets in version 3 signature packet")

  def _validate_hash_prefix(self):
    if len(self.hash_prefix) != HASH_PREFIX_LENGTH:
      raise pgpsig.formats._err(self.hash_prefix, # pylint: disable=protected-access
          "{} octet hash prefix".format(HASH_PREFIX_LENGTH))


def _to_seconds(timestamp):
  return SignatureCreationTime(timestamp).timestamp


def _encode_subpacket_area(subpackets, name):
  """Encode subpackets as area with two-octet length prefix. """
  area = pgpsig.subpackets.encode_subpackets(subpackets)
  if len(area) > MAX_SUBPACKET_AREA_LENGTH:
    raise EncodingError("The {} subpacket area has {} octets, maximum is "
        "{}".format(name, len(area), MAX_SUBPACKET_AREA_LENGTH))

  return struct.pack(">H", len(area)) + area


def _parse_subpacket_area(data, ptr, name):
  """Parse the subpacket area with two-octet length prefix at ptr. Returns
  the parsed subpackets and the position after the area. """
  octet_count = pgpsig.util.read_uint(data, ptr, 2)
  ptr += 2

  area = data[ptr:ptr + octet_count]
  # Check whether we were actually able to read this many octets
  if len(area) != octet_count:
    raise TruncatedDataError("This signature packet seems to be corrupted. "
        "It is missing {} subpacket octets!".format(name))

  try:
    subpackets = pgpsig.subpackets.parse_subpackets(area)

  except PacketParsingError as e:
    raise type(e)("Invalid {} subpacket area: {}".format(name, e)) from e

  return subpackets, ptr + octet_count


def _parse_v3_signature_packet(data):
  """Parse version 3 signature packet with fixed layout. """
  ptr = 1
  if pgpsig.util.read_uint(data, ptr, 1) != V3_HASHED_MATERIAL_LENGTH:
    raise PacketVersionNotSupportedError("Version 3 signature packets must "
        "have hashed material length '{}', got '{}'".format(
        V3_HASHED_MATERIAL_LENGTH, data[ptr]))
  ptr += 1

  signature_type = pgpsig.util.read_uint(data, ptr, 1)
  ptr += 1

  creation_time = pgpsig.util.read_uint(data, ptr, 4)
  ptr += 4

  signer = pgpsig.util.read_uint(data, ptr, 8)
  ptr += 8

  pubkey_algorithm = pgpsig.util.read_uint(data, ptr, 1)
  ptr += 1

  hash_algorithm = pgpsig.util.read_uint(data, ptr, 1)
  ptr += 1

  hash_prefix = pgpsig.util.read_octets(data, ptr, HASH_PREFIX_LENGTH)
  ptr += HASH_PREFIX_LENGTH

  return SignaturePacket(
      version=SIGNATURE_PACKET_VERSION_3,
      signature_type_id=signature_type,
      pubkey_algorithm_id=pubkey_algorithm,
      hash_algorithm_id=hash_algorithm,
      timestamp=pgpsig.subpackets.EPOCH + datetime.timedelta(
          seconds=creation_time),
      signer=signer,
      hash_prefix=hash_prefix,
      signature_contents=data[ptr:])


def _parse_v4_signature_packet(data):
  """Parse version 4 signature packet with subpacket areas. """
  ptr = 1
  signature_type = pgpsig.util.read_uint(data, ptr, 1)
  ptr += 1

  pubkey_algorithm = pgpsig.util.read_uint(data, ptr, 1)
  ptr += 1

  hash_algorithm = pgpsig.util.read_uint(data, ptr, 1)
  ptr += 1

  hashed_subpackets, ptr = _parse_subpacket_area(data, ptr, "hashed")
  unhashed_subpackets, ptr = _parse_subpacket_area(data, ptr, "unhashed")

  hash_prefix = pgpsig.util.read_octets(data, ptr, HASH_PREFIX_LENGTH)
  ptr += HASH_PREFIX_LENGTH

  # Favor hashed over unhashed subpackets, and the first over later ones
  creation_time = (
      pgpsig.subpackets.find_subpacket(hashed_subpackets,
          SignatureCreationTime) or
      pgpsig.subpackets.find_subpacket(unhashed_subpackets,
          SignatureCreationTime))

  issuer = (
      pgpsig.subpackets.find_subpacket(hashed_subpackets, Issuer) or
      pgpsig.subpackets.find_subpacket(unhashed_subpackets, Issuer))

  return SignaturePacket(
      version=SIGNATURE_PACKET_VERSION_4,
      signature_type_id=signature_type,
      pubkey_algorithm_id=pubkey_algorithm,
      hash_algorithm_id=hash_algorithm,
      timestamp=None if creation_time is None else creation_time.value,
      signer=None if issuer is None else issuer.value,
      hashed_subpackets=hashed_subpackets,
      unhashed_subpackets=unhashed_subpackets,
      hash_prefix=hash_prefix,
      signature_contents=data[ptr:])


def parse_signature_packet(data):
  """
  <Purpose>
    Parse an RFC4880-encoded signature packet body. The first octet selects
    the layout: 0x03 for the fixed version 3 layout, which must be followed
    by 0x05, and 0x04 for the version 4 layout with hashed and unhashed
    subpacket areas.

  <Arguments>
    data:
           the signature packet body as described in section 5.2.2 (version
           3) or 5.2.3 (version 4), without packet header.

  <Exceptions>
    pgpsig.exceptions.PacketVersionNotSupportedError
           if the leading octets match neither layout.

    pgpsig.exceptions.TruncatedDataError
           if a fixed field or subpacket area is incomplete.

    pgpsig.exceptions.ReservedValueError
           if a subpacket uses a reserved type.

  <Side Effects>
    None.

  <Returns>
    A SignaturePacket. All remaining octets after the hash prefix are the
    signature value.

  """
  data = bytes(data)
  version_number = pgpsig.util.read_uint(data, 0, 1)

  if version_number == SIGNATURE_PACKET_VERSION_3:
    return _parse_v3_signature_packet(data)

  elif version_number == SIGNATURE_PACKET_VERSION_4:
    return _parse_v4_signature_packet(data)

  raise PacketVersionNotSupportedError("Signature version '{}' not supported, "
      "must be one of {}.".format(version_number,
      sorted(SUPPORTED_SIGNATURE_PACKET_VERSIONS)))
