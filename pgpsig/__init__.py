# Copyright the pgpsig contributors
# SPDX-License-Identifier: Apache-2.0

"""
Configure base logger for pgpsig (see pgpsig.log for details).

"""
import pgpsig.log


# pgpsig version
__version__ = "0.1.0"
