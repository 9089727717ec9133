# Copyright the pgpsig contributors
# SPDX-License-Identifier: Apache-2.0

"""
<Program Name>
  settings.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  A central place to define default settings that can be used throughout the
  package.

  Defaults can be changed,
   - here (hardcoded),
   - or programmatically, e.g.
     ```
     import pgpsig.settings
     pgpsig.settings.STRICT_INTEGER_PAYLOADS = False
     ```

"""
# The debug setting is used to set the pgpsig base logger to logging.DEBUG
DEBUG = False

# Signature creation/expiration time, key expiration time and issuer
# subpackets carry a fixed-width integer (4 resp. 8 octets). If True, a
# payload of any other size is rejected with an IntegerReadError. If False,
# longer payloads are accepted and only their leading octets are read, which
# is what some older implementations do.
STRICT_INTEGER_PAYLOADS = True
