"""
<Program Name>
  test_algorithms.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Test algorithm registries in pgpsig/algorithms.py and the signature type
  registry in pgpsig/constants.py.

"""
import hashlib
import unittest
from unittest.mock import patch

from securesystemslib.exceptions import UnsupportedAlgorithmError

import pgpsig.rsa
import pgpsig.dsa
from pgpsig.algorithms import (PublicKeyAlgorithm, HashAlgorithm,
    SymmetricKeyAlgorithm)
from pgpsig.constants import SignatureType, SIGNATURE_HANDLERS
from pgpsig.exceptions import UnknownAlgorithmError


class TestRegistryLookup(unittest.TestCase):
  """Test total lookups in both directions. """

  def test_known_ids(self):
    self.assertEqual(PublicKeyAlgorithm.from_id(1), PublicKeyAlgorithm.Rsa)
    self.assertEqual(PublicKeyAlgorithm.from_id(17), PublicKeyAlgorithm.Dsa)
    self.assertEqual(HashAlgorithm.from_id(8), HashAlgorithm.Sha256)
    self.assertEqual(HashAlgorithm.from_id(3), HashAlgorithm.Ripemd160)
    self.assertEqual(SymmetricKeyAlgorithm.from_id(9),
        SymmetricKeyAlgorithm.Aes256)

    for registry in [PublicKeyAlgorithm, HashAlgorithm, SymmetricKeyAlgorithm]:
      for member in registry:
        self.assertEqual(registry.from_id(member.to_id()), member)

  def test_unknown_ids(self):
    """Every octet value maps to some member. """
    for registry in [PublicKeyAlgorithm, HashAlgorithm, SymmetricKeyAlgorithm]:
      for value in range(256):
        self.assertIsInstance(registry.from_id(value), registry)

      self.assertEqual(registry.from_id(250), registry.Unknown)
      self.assertEqual(registry(250), registry.Unknown)
      self.assertEqual(registry.Unknown.to_id(), 0xFF)

    self.assertEqual(HashAlgorithm.from_id(4), HashAlgorithm.Unknown)
    self.assertEqual(PublicKeyAlgorithm.from_id(22),
        PublicKeyAlgorithm.Unknown)

  def test_non_int_id(self):
    with self.assertRaises(TypeError):
      HashAlgorithm.from_id("sha256")

  def test_symmetric_reserved(self):
    self.assertEqual(SymmetricKeyAlgorithm.from_id(5),
        SymmetricKeyAlgorithm.Reserved)
    self.assertEqual(SymmetricKeyAlgorithm.from_id(6),
        SymmetricKeyAlgorithm.Reserved)

  def test_signature_type(self):
    self.assertEqual(SignatureType(0x13), SignatureType.PositiveCertification)
    self.assertEqual(SignatureType(0x77), SignatureType.Unknown)
    self.assertEqual(int(SignatureType.Unknown), 0xFF)


class TestPublicKeyAlgorithm(unittest.TestCase):
  def test_families(self):
    for algorithm in PublicKeyAlgorithm:
      self.assertEqual(algorithm.is_rsa, algorithm.to_id() in (1, 2, 3))
      self.assertEqual(algorithm.is_dsa, algorithm.to_id() == 17)

  def test_signature_handlers(self):
    """RSA-family algorithms are handled by pgpsig.rsa, DSA by pgpsig.dsa. """
    self.assertEqual(SIGNATURE_HANDLERS, {
      PublicKeyAlgorithm.Rsa: pgpsig.rsa,
      PublicKeyAlgorithm.RsaEncryptOnly: pgpsig.rsa,
      PublicKeyAlgorithm.RsaSignOnly: pgpsig.rsa,
      PublicKeyAlgorithm.Dsa: pgpsig.dsa,
    })


class TestHashAlgorithm(unittest.TestCase):
  """Test digests and object identifiers. """

  def test_digest(self):
    for algorithm, name in [(HashAlgorithm.Md5, "md5"),
        (HashAlgorithm.Sha1, "sha1"), (HashAlgorithm.Sha224, "sha224"),
        (HashAlgorithm.Sha256, "sha256"), (HashAlgorithm.Sha384, "sha384"),
        (HashAlgorithm.Sha512, "sha512")]:
      expected = hashlib.new(name, b"abc").digest()
      self.assertEqual(algorithm.digest(b"abc"), expected)
      self.assertEqual(algorithm.digest_size, len(expected))

  def test_ripemd160(self):
    self.assertEqual(HashAlgorithm.Ripemd160.digest_size, 20)

    try:
      expected = hashlib.new("ripemd160", b"abc").digest()

    except ValueError:
      with self.assertRaises(UnsupportedAlgorithmError):
        HashAlgorithm.Ripemd160.digest(b"abc")

    else:
      self.assertEqual(HashAlgorithm.Ripemd160.digest(b"abc"), expected)

  def test_ripemd160_unavailable(self):
    with patch("pgpsig.algorithms.hashlib.new", side_effect=ValueError):
      with self.assertRaises(UnsupportedAlgorithmError):
        HashAlgorithm.Ripemd160.digest(b"abc")

  def test_oid(self):
    self.assertEqual(HashAlgorithm.Sha256.oid.dotted_string,
        "2.16.840.1.101.3.4.2.1")
    self.assertEqual(HashAlgorithm.Sha1.oid.dotted_string, "1.3.14.3.2.26")
    self.assertEqual(HashAlgorithm.Ripemd160.oid.dotted_string,
        "1.3.36.3.2.1")

  def test_unknown(self):
    """Operations that need to know the algorithm fail on Unknown. """
    with self.assertRaises(UnknownAlgorithmError) as ctx:
      HashAlgorithm.Unknown.digest(b"abc")
    # The registry lookup failure is not chained to the error
    self.assertIsNone(ctx.exception.__cause__)
    self.assertTrue(ctx.exception.__suppress_context__)

    with self.assertRaises(UnknownAlgorithmError) as ctx:
      HashAlgorithm.Unknown.oid # pylint: disable=pointless-statement
    self.assertTrue(ctx.exception.__suppress_context__)

    with self.assertRaises(UnknownAlgorithmError):
      HashAlgorithm.from_id(100).digest_size # pylint: disable=expression-not-assigned

    self.assertTrue(issubclass(UnknownAlgorithmError,
        UnsupportedAlgorithmError))


class TestSymmetricKeyAlgorithm(unittest.TestCase):
  def test_block_size(self):
    self.assertEqual(SymmetricKeyAlgorithm.TripleDes.block_size, 8)
    self.assertEqual(SymmetricKeyAlgorithm.Cast5.block_size, 8)
    self.assertEqual(SymmetricKeyAlgorithm.Aes128.block_size, 16)
    self.assertEqual(SymmetricKeyAlgorithm.Twofish.block_size, 16)
    self.assertEqual(SymmetricKeyAlgorithm.Plaintext.block_size, 0)
    self.assertEqual(SymmetricKeyAlgorithm.Reserved.block_size, 0)
    self.assertEqual(SymmetricKeyAlgorithm.Unknown.block_size, 0)


if __name__ == "__main__":
  unittest.main()
