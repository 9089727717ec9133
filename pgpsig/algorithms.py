# Copyright the pgpsig contributors
# SPDX-License-Identifier: Apache-2.0

"""
<Module Name>
  algorithms.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Registries for the public-key, hash and symmetric-key algorithm identifiers
  used in signature packets (see RFC4880 9.1., 9.2. and 9.4.).

  Looking up an identifier never fails: identifiers that are not assigned (or
  not known to us) map to the `Unknown` member, so that a signature made with
  a newly assigned algorithm can still be parsed. Operations that need to know
  what the algorithm actually is, i.e. computing a digest or looking up an
  object identifier, raise an UnknownAlgorithmError for `Unknown`.

"""
import hashlib
import logging
from enum import IntEnum

import cryptography.hazmat.primitives.hashes as hashing
from cryptography.x509 import ObjectIdentifier

from securesystemslib.exceptions import UnsupportedAlgorithmError

from pgpsig.exceptions import UnknownAlgorithmError

log = logging.getLogger(__name__)


class _Registry(IntEnum):
  """Base class for algorithm registries with a total lookup in both
  directions. Subclasses must define an `Unknown` member. """

  @classmethod
  def _missing_(cls, value):
    if not isinstance(value, int):
      raise TypeError("cannot look up {} by non-int '{}'".format(
          cls.__name__, type(value)))
    log.debug("Unknown {} id '{}'".format(cls.__name__, value))
    return cls.Unknown # pylint: disable=no-member

  @classmethod
  def from_id(cls, value):
    """Return the registry member for the passed numeric identifier, or
    `Unknown` if the identifier is not known. """
    return cls(value)

  def to_id(self):
    """Return the numeric identifier, 0xFF for `Unknown`. """
    return int(self)


class PublicKeyAlgorithm(_Registry):
  """Public-key algorithms, see section 9.1 of RFC4880. """
  Rsa = 1
  RsaEncryptOnly = 2
  RsaSignOnly = 3
  ElgamalEncryptOnly = 16
  Dsa = 17
  EllipticCurve = 18
  Ecdsa = 19
  Elgamal = 20
  DiffieHellman = 21
  Unknown = 0xFF

  @property
  def is_rsa(self):
    return self in (PublicKeyAlgorithm.Rsa, PublicKeyAlgorithm.RsaEncryptOnly,
        PublicKeyAlgorithm.RsaSignOnly)

  @property
  def is_dsa(self):
    return self is PublicKeyAlgorithm.Dsa


class HashAlgorithm(_Registry):
  """Hash algorithms, see section 9.4 of RFC4880. """
  Md5 = 1
  Sha1 = 2
  Ripemd160 = 3
  Sha256 = 8
  Sha384 = 9
  Sha512 = 10
  Sha224 = 11
  Unknown = 0xFF

  @property
  def oid(self):
    """
    <Purpose>
      The object identifier of the hash algorithm, as embedded in the
      DigestInfo structure of PKCS#1 v1.5 signatures.

    <Exceptions>
      pgpsig.exceptions.UnknownAlgorithmError
              if the hash algorithm is `Unknown`.

    <Returns>
      A cryptography.x509.ObjectIdentifier

    """
    try:
      return ObjectIdentifier(HASH_ALGORITHM_OIDS[self])

    except KeyError:
      raise UnknownAlgorithmError("Cannot look up object identifier of "
          "unknown hash algorithm") from None

  @property
  def digest_size(self):
    """The size of the digest in bytes. """
    if self is HashAlgorithm.Ripemd160:
      return 20

    return self._hashing_class().digest_size

  def digest(self, data):
    """
    <Purpose>
      Compute the digest of the passed data with this hash algorithm.

    <Arguments>
      data:
              The bytes to hash.

    <Exceptions>
      pgpsig.exceptions.UnknownAlgorithmError
              if the hash algorithm is `Unknown`.

      securesystemslib.exceptions.UnsupportedAlgorithmError
              if the hash algorithm is not available on this platform.

    <Returns>
      The digest bytes

    """
    if self is HashAlgorithm.Ripemd160:
      # pyca/cryptography does not provide RIPEMD160, and OpenSSL 3 only
      # provides it through the legacy provider
      try:
        hasher = hashlib.new("ripemd160")

      except ValueError:
        raise UnsupportedAlgorithmError("Hash algorithm 'RIPEMD160' is not "
            "available on this platform") from None

      hasher.update(bytes(data))
      return hasher.digest()

    hasher = hashing.Hash(self._hashing_class()())
    hasher.update(bytes(data))
    return hasher.finalize()

  def _hashing_class(self):
    """Return the pyca/cryptography hashing class for this algorithm. """
    try:
      return HASHING_CLASSES[self]

    except KeyError:
      raise UnknownAlgorithmError("Cannot compute digest with unknown hash "
          "algorithm") from None


class SymmetricKeyAlgorithm(_Registry):
  """Symmetric-key algorithms, see section 9.2 of RFC4880. Identifiers 5 and
  6 are reserved and map to `Reserved`. """
  Plaintext = 0
  Idea = 1
  TripleDes = 2
  Cast5 = 3
  Blowfish = 4
  Reserved = 5
  Aes128 = 7
  Aes192 = 8
  Aes256 = 9
  Twofish = 10
  Unknown = 0xFF

  @classmethod
  def _missing_(cls, value):
    if value == 6:
      return cls.Reserved
    return super(SymmetricKeyAlgorithm, cls)._missing_(value)

  @property
  def block_size(self):
    """The block size of this cipher in bytes. """
    return SYMMETRIC_BLOCK_SIZES.get(self, 0)


HASHING_CLASSES = {
  HashAlgorithm.Md5: hashing.MD5,
  HashAlgorithm.Sha1: hashing.SHA1,
  HashAlgorithm.Sha256: hashing.SHA256,
  HashAlgorithm.Sha384: hashing.SHA384,
  HashAlgorithm.Sha512: hashing.SHA512,
  HashAlgorithm.Sha224: hashing.SHA224,
}

HASH_ALGORITHM_OIDS = {
  HashAlgorithm.Md5: "1.2.840.113549.2.5",
  HashAlgorithm.Sha1: "1.3.14.3.2.26",
  HashAlgorithm.Ripemd160: "1.3.36.3.2.1",
  HashAlgorithm.Sha256: "2.16.840.1.101.3.4.2.1",
  HashAlgorithm.Sha384: "2.16.840.1.101.3.4.2.2",
  HashAlgorithm.Sha512: "2.16.840.1.101.3.4.2.3",
  HashAlgorithm.Sha224: "2.16.840.1.101.3.4.2.4",
}

SYMMETRIC_BLOCK_SIZES = {
  SymmetricKeyAlgorithm.Idea: 8,
  SymmetricKeyAlgorithm.TripleDes: 8,
  SymmetricKeyAlgorithm.Cast5: 8,
  SymmetricKeyAlgorithm.Blowfish: 8,
  SymmetricKeyAlgorithm.Aes128: 16,
  SymmetricKeyAlgorithm.Aes192: 16,
  SymmetricKeyAlgorithm.Aes256: 16,
  SymmetricKeyAlgorithm.Twofish: 16,
}
