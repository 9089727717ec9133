# Copyright the pgpsig contributors
# SPDX-License-Identifier: Apache-2.0

"""
<Module Name>
  constants.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  aggregates all the constant definitions and lookup structures for signature
  packet handling
"""
from enum import IntEnum

import pgpsig.rsa as rsa
import pgpsig.dsa as dsa
from pgpsig.algorithms import PublicKeyAlgorithm


# See RFC4880 section 4.3. Packet Tags
PACKET_TYPE_SIGNATURE = 0x02

# See section 5.2.2 (version 3) and 5.2.3 (version 4) of RFC4880
SIGNATURE_PACKET_VERSION_3 = 0x03
SIGNATURE_PACKET_VERSION_4 = 0x04

# In version 3 signatures the octet following the version is the length of
# the hashed material, which must be 5 (signature type and creation time)
V3_HASHED_MATERIAL_LENGTH = 0x05

# Unknown registry members and signature types map to this sentinel
UNKNOWN_ID = 0xFF

# Bit 7 of the subpacket type octet flags a critical subpacket
# (see RFC4880 5.2.3.1.)
SUBPACKET_CRITICAL_BIT = 0x80

# Type octets RFC4880 5.2.3.1. lists as reserved. Using them is a format
# violation rather than an unknown subpacket.
RESERVED_SUBPACKET_TYPES = frozenset({0, 1, 8, 13, 14, 15, 17, 18, 19})

# RSA-family signatures carry one MPI, DSA signatures two (see RFC4880 5.2.2.)
SIGNATURE_HANDLERS = {
  algorithm: rsa if algorithm.is_rsa else dsa
  for algorithm in PublicKeyAlgorithm
  if algorithm.is_rsa or algorithm.is_dsa
}


class SignatureType(IntEnum):
  """Signature types, see section 5.2.1 of RFC4880. """
  BinaryDocument = 0x00
  TextDocument = 0x01
  Standalone = 0x02
  GenericCertification = 0x10
  PersonaCertification = 0x11
  CasualCertification = 0x12
  PositiveCertification = 0x13
  SubkeyBinding = 0x18
  PrimaryKeyBinding = 0x19
  DirectKey = 0x1F
  KeyRevocation = 0x20
  SubkeyRevocation = 0x28
  CertificationRevocation = 0x30
  Timestamp = 0x40
  ThirdPartyConfirmation = 0x50
  Unknown = UNKNOWN_ID

  @classmethod
  def _missing_(cls, value):
    if not isinstance(value, int):
      raise TypeError("cannot look up SignatureType by non-int '{}'".format(
          type(value)))
    return cls.Unknown


class SubpacketType(IntEnum):
  """Assigned signature subpacket types, see section 5.2.3.1 of RFC4880. """
  SignatureCreationTime = 2
  SignatureExpirationTime = 3
  ExportableCertification = 4
  TrustSignature = 5
  RegularExpression = 6
  Revocable = 7
  KeyExpirationTime = 9
  PreferredSymmetricAlgorithms = 11
  RevocationKey = 12
  Issuer = 16
  NotationData = 20
  PreferredHashAlgorithms = 21
  PreferredCompressionAlgorithms = 22
  KeyServerPreferences = 23
  PreferredKeyServer = 24
  PrimaryUserId = 25
  PolicyUri = 26
  KeyFlags = 27
  SignerUserId = 28
  RevocationReason = 29
  Features = 30
  SignatureTarget = 31
  EmbeddedSignature = 32
