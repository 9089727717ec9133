# Copyright the pgpsig contributors
# SPDX-License-Identifier: Apache-2.0

"""
<Module Name>
  dsa.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  DSA-specific handling routines for signature values
"""
import logging

import attr

import pgpsig.util
import pgpsig.formats

log = logging.getLogger(__name__)


@attr.s(frozen=True)
class DsaSignature(object):
  """The r and s values of a DSA signature (see RFC4880 5.2.2.). """
  r = attr.ib()
  s = attr.ib()

  @r.validator
  @s.validator
  def _validate_int(self, attribute, value): # pylint: disable=unused-argument
    pgpsig.formats._check_int(value) # pylint: disable=protected-access


def get_signature_params(data):
  """
  <Purpose>
    Parse the signature parameters as multi-precision-integers.

  <Arguments>
    data:
           the RFC4880-encoded signature value as described in the fourth
           paragraph of section 5.2.2.

  <Exceptions>
    pgpsig.exceptions.TruncatedDataError: if one of the MPIs is truncated

  <Side Effects>
    None.

  <Returns>
    A DsaSignature
  """
  r, _ = pgpsig.util.decode_mpi(data)

  # The s-value starts at the encoded length of the r-value, which differs
  # from the octets consumed above if the bit count in data overstates r.
  s_position = pgpsig.util.get_mpi_encoded_length(r)
  s, s_length = pgpsig.util.decode_mpi(data[s_position:])

  if len(data) > s_position + s_length:
    log.debug("Ignoring {} trailing octets after DSA signature".format(
        len(data) - s_position - s_length))

  return DsaSignature(r, s)


def encode_signature_params(signature):
  """
  <Purpose>
    Encode the passed DsaSignature as r-value MPI followed by s-value MPI.

  <Exceptions>
    pgpsig.exceptions.EncodingError: if a value cannot be encoded as MPI

  <Returns>
    The signature value octets.
  """
  return (pgpsig.util.encode_mpi(signature.r) +
      pgpsig.util.encode_mpi(signature.s))
