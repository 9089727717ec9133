# Copyright the pgpsig contributors
# SPDX-License-Identifier: Apache-2.0

"""
<Module Name>
  util.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  general-purpose utilities for binary data handling: fixed-width integer
  reads, subpacket lengths, packet headers and multi-precision integers
"""
import struct
import logging

from pgpsig.exceptions import (PacketParsingError, TruncatedDataError,
    EncodingError)

log = logging.getLogger(__name__)

# Largest length a five-octet subpacket length can express
MAX_SUBPACKET_LENGTH = 0xFFFFFFFF

# The bit count of an MPI is a two-octet value
MAX_MPI_BITS = 0xFFFF


def read_octets(data, position, size):
  """
  <Purpose>
    Read exactly `size` octets from `data` at `position`.

  <Arguments>
    data:
            A bytes-like object.

    position:
            Offset of the first octet.

    size:
            The number of octets to read.

  <Exceptions>
    pgpsig.exceptions.TruncatedDataError
            if fewer than `size` octets are available at `position`.

  <Returns>
    The octets as bytes.

  """
  chunk = bytes(data[position:position + size])
  if len(chunk) != size:
    raise TruncatedDataError("Expected {} octets at position {}, got only "
        "{}".format(size, position, len(chunk)))

  return chunk


def read_uint(data, position, size):
  """Read a big-endian unsigned integer of `size` octets from `data` at
  `position`, see `read_octets`. """
  return int.from_bytes(read_octets(data, position, size), "big")


def parse_subpacket_length(data, position=0):
  """
  <Purpose>
    Parse a subpacket length as per RFC4880 5.2.3.1. Signature Subpacket
    Specification.

    If the first octet is less than 192, it is the length. If it is in 192 to
    254, the length is (1st_octet - 192) * 256 + 2nd_octet + 192. If it is 255
    the length is the big-endian four-octet value following it.

  <Arguments>
    data:
            A bytes-like object.

    position: (optional)
            Offset of the first length octet.

  <Exceptions>
    pgpsig.exceptions.TruncatedDataError
            if the length octets are incomplete.

  <Returns>
    A tuple of the decoded length and the number of octets the length field
    occupies (1, 2 or 5).

  """
  first_octet = read_uint(data, position, 1)

  if first_octet < 192:
    return first_octet, 1

  elif first_octet < 255:
    second_octet = read_uint(data, position + 1, 1)
    return ((first_octet - 192) << 8) + second_octet + 192, 2

  else:
    return read_uint(data, position + 1, 4), 5


def encode_subpacket_length(length):
  """
  <Purpose>
    Encode a subpacket length in the shortest of the three RFC4880 5.2.3.1.
    forms.

  <Exceptions>
    pgpsig.exceptions.EncodingError
            if the length cannot be expressed.

  <Returns>
    The length octets.

  """
  if length < 0 or length > MAX_SUBPACKET_LENGTH:
    raise EncodingError("Subpacket length '{}' out of range 0 to {}".format(
        length, MAX_SUBPACKET_LENGTH))

  if length < 192:
    return bytes([length])

  elif length <= 16319:
    length -= 192
    return bytes([(length >> 8) + 192, length & 0xFF])

  else:
    return b"\xff" + struct.pack(">I", length)


def parse_packet_header(data, expected_type=None):
  """
  <Purpose>
    Parse out packet type and header and body lengths from an RFC4880 packet.

  <Arguments>
    data:
            An RFC4880 packet as described in section 4.2 of the rfc.

    expected_type: (optional)
            Used to error out if the packet does not have the expected
            type. See pgpsig.constants.PACKET_TYPE_* for available types.

  <Exceptions>
    pgpsig.exceptions.PacketParsingError
            If the new format packet length encodes a partial body length
            If the old format packet length encodes an indeterminate length
            If the expected_type was passed and does not match the packet type

    pgpsig.exceptions.TruncatedDataError
            If the passed header is incomplete

  <Side Effects>
    None.

  <Returns>
    A tuple of packet type, header length, body length and packet length.
    (see  RFC4880 4.3. for the list of available packet types)

  """
  first_octet = read_uint(data, 0, 1)

  if not first_octet & 0b10000000:
    raise PacketParsingError("Invalid packet tag '{}', bit 7 must be "
        "set".format(first_octet))

  # If Bit 6 of 1st octet is set we parse a New Format Packet Length, and
  # an Old Format Packet Lengths otherwise
  if first_octet & 0b01000000:
    # In new format packet lengths the packet type is encoded in Bits 5-0 of
    # the 1st octet of the packet
    packet_type = first_octet & 0b00111111

    # The rest of the packet header is the body length header, which may
    # consist of one, two or five octets.
    length_octet = read_uint(data, 1, 1)
    if length_octet < 192:
      header_len = 2
      body_len = length_octet

    elif length_octet <= 223:
      header_len = 3
      body_len = ((length_octet - 192) << 8) + read_uint(data, 2, 1) + 192

    elif length_octet < 255:
      raise PacketParsingError("New length format packets of partial body "
          "lengths are not supported")

    else:
      header_len = 6
      body_len = read_uint(data, 2, 4)

  else:
    # In old format packet lengths the packet type is encoded in Bits 5-2 of
    # the 1st octet and the length type in Bits 1-0
    packet_type = (first_octet & 0b00111100) >> 2
    length_type = first_octet & 0b00000011

    if length_type == 3:
      raise PacketParsingError("Old length format packets of indeterminate "
          "length are not supported")

    # The body length is encoded using one, two, or four octets, starting
    # with the second octet of the packet
    length_len = 1 << length_type
    header_len = 1 + length_len
    body_len = read_uint(data, 1, length_len)

  if expected_type is not None and packet_type != expected_type:
    raise PacketParsingError("Expected packet {}, but got {} instead!".format(
        expected_type, packet_type))

  return packet_type, header_len, body_len, header_len + body_len


def get_mpi_length(data):
  """
  <Purpose>
    parses the two-octet bit count of an MPI (Multi-Precision Integer) and
    returns the length of the magnitude in octets. This is mostly done to
    perform bitwise to byte-wise conversion.

  <Arguments>
    data: The MPI data

  <Exceptions>
    pgpsig.exceptions.TruncatedDataError if the bit count is incomplete.

  <Returns>
    The octet length of the MPI magnitude following the bit count.
  """
  bitlength = read_uint(data, 0, 2)
  # Notice the /8 at the end, this length is the bitlength, not the length of
  # the data in bytes (as len reports it)
  return (bitlength + 7) // 8


def decode_mpi(data):
  """
  <Purpose>
    Decode the MPI at the beginning of the passed data (see RFC4880 3.2.).

  <Arguments>
    data: A bytes-like object starting with an MPI. Trailing octets are
          ignored.

  <Exceptions>
    pgpsig.exceptions.TruncatedDataError if the MPI is incomplete.

  <Returns>
    A tuple of the decoded integer and the number of octets consumed.

  """
  magnitude_length = get_mpi_length(data)
  magnitude = bytes(data[2:2 + magnitude_length])
  if len(magnitude) != magnitude_length:
    raise TruncatedDataError("This MPI was truncated! Expected {} octets, "
        "got {}".format(magnitude_length, len(magnitude)))

  return int.from_bytes(magnitude, "big"), 2 + magnitude_length


def encode_mpi(value):
  """
  <Purpose>
    Encode a non-negative integer as MPI (see RFC4880 3.2.), i.e. its bit
    count as two-octet big-endian value followed by the big-endian magnitude
    without leading zero octets.

  <Exceptions>
    pgpsig.exceptions.EncodingError if the value is negative or too large.

  <Returns>
    The MPI octets.

  """
  if value < 0:
    raise EncodingError("Cannot encode negative value as MPI")

  bitlength = value.bit_length()
  if bitlength > MAX_MPI_BITS:
    raise EncodingError("Cannot encode {} bit value as MPI, maximum is "
        "{}".format(bitlength, MAX_MPI_BITS))

  return struct.pack(">H", bitlength) + value.to_bytes(
      (bitlength + 7) // 8, "big")


def get_mpi_encoded_length(value):
  """Return the number of octets `encode_mpi` produces for `value`. """
  if value < 0:
    raise EncodingError("Cannot encode negative value as MPI")

  return 2 + (value.bit_length() + 7) // 8
