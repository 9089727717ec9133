# Copyright the pgpsig contributors
# SPDX-License-Identifier: Apache-2.0

"""
<Module Name>
  rsa.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  RSA-specific handling routines for signature values
"""
import attr

import pgpsig.util
import pgpsig.formats


@attr.s(frozen=True)
class RsaSignature(object):
  """The signature value of an RSA signature, i.e. m**d mod n (see RFC4880
  5.2.2.).

  Attributes:
    value: The signature as non-negative integer.

  """
  value = attr.ib()

  @value.validator
  def _validate_value(self, attribute, value): # pylint: disable=unused-argument
    pgpsig.formats._check_int(value) # pylint: disable=protected-access


def get_signature_params(data):
  """
  <Purpose>
    Parse the signature parameters as multi-precision-integers.

  <Arguments>
    data:
           the RFC4880-encoded signature value as described in the third
           paragraph of section 5.2.2.

  <Exceptions>
    pgpsig.exceptions.TruncatedDataError: if the MPI is truncated

  <Side Effects>
    None.

  <Returns>
    An RsaSignature
  """
  value, _ = pgpsig.util.decode_mpi(data)
  return RsaSignature(value)


def encode_signature_params(signature):
  """
  <Purpose>
    Encode the passed RsaSignature as a single MPI.

  <Exceptions>
    pgpsig.exceptions.EncodingError: if the value cannot be encoded as MPI

  <Returns>
    The signature value octets.
  """
  return pgpsig.util.encode_mpi(signature.value)
