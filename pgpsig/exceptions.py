# Copyright the pgpsig contributors
# SPDX-License-Identifier: Apache-2.0

"""
<Program Name>
  exceptions.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Define Exceptions used in the pgpsig package. Following the practice from
  securesystemslib the names chosen for exception classes should end in
  'Error' (except where there is a good reason not to).

  Every decoding failure is a PacketParsingError, whose message states the
  failing stage. Callers that need to tell failure kinds apart catch the
  subclasses.

"""
from securesystemslib.exceptions import Error, UnsupportedAlgorithmError


class PacketParsingError(Error):
  """Indicates that a signature packet or subpacket could not be decoded. """

class TruncatedDataError(PacketParsingError):
  """Indicates that fewer octets are available than a field requires. """

class IntegerReadError(TruncatedDataError):
  """Indicates that a fixed-width integer subpacket payload has the wrong
  size. """

class ReservedValueError(PacketParsingError):
  """Indicates the use of a subpacket type that is reserved in RFC4880. """

class PacketVersionNotSupportedError(PacketParsingError):
  """Indicates that the leading octets match neither the version 3 nor the
  version 4 signature packet layout. """

class UnknownAlgorithmError(UnsupportedAlgorithmError):
  """Indicates that an operation requires semantic knowledge about an
  algorithm whose identifier is not known. """

class EncodingError(Error):
  """Indicates that a value cannot be represented in the wire format. """
