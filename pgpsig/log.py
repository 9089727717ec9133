# Copyright the pgpsig contributors
# SPDX-License-Identifier: Apache-2.0

"""
<Program Name>
  log.py

<Started>
  Oct 19, 2026

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Configures the "pgpsig" base logger, which library modules use for
  debugging output, e.g. about preserved unknown subpackets or signature
  values that are kept opaque because of an unknown public-key algorithm.

  The default log level of the base logger is 'logging.WARNING', unless
  'pgpsig.settings.DEBUG' is 'True', in that case the default log level is
  'logging.DEBUG' and log messages include the logger name and line number.

  The default handler of the base logger is a 'StreamHandler', which writes all
  log messages permitted by the used log level to 'sys.stderr'.

<Usage>
  This module is imported in '__init__.py' to configure the base logger.
  Applications embedding pgpsig can fetch the base logger by name and adjust
  its verbosity:

  ```
  import logging
  LOG = logging.getLogger("pgpsig")
  LOG.setLevelVerboseOrQuiet(verbose=True, quiet=False)
  ```

  Library modules create loggers passing the module name, which inherit the
  base logger's log level and format:

  ```
  import logging
  log = logging.getLogger(__name__)

  log.debug("Preserving unknown subpacket type 100")
  # pgpsig.subpackets:210:DEBUG:Preserving unknown subpacket type 100
  ```

"""
import logging
import pgpsig.settings

# Different log message formats for different log levels
FORMAT_MESSAGE = "%(message)s"
FORMAT_DEBUG = "%(name)s:%(lineno)d:%(levelname)s:%(message)s"

# Cache default logger class, should be logging.Logger if not changed elsewhere
_LOGGER_CLASS = logging.getLoggerClass()

class PgpsigLogger(_LOGGER_CLASS):
  """logging.Logger subclass, providing a convenience method for log
  levels. """

  QUIET = logging.CRITICAL + 1

  # Allow non snake_case function name for consistency with logging library
  def setLevelVerboseOrQuiet(self, verbose, quiet): # pylint: disable=invalid-name
    """Convenience method to set the logger's verbosity level based on the
    passed booleans verbose and quiet. """
    if verbose:
      self.setLevel(logging.INFO)

    elif quiet:
      self.setLevel(self.QUIET)


# Temporarily change logger default class to instantiate the pgpsig base logger
logging.setLoggerClass(PgpsigLogger)
LOGGER = logging.getLogger("pgpsig")
logging.setLoggerClass(_LOGGER_CLASS)

# In DEBUG mode we log all log types and add additional information,
# otherwise we only log warning, error and critical and only the message.
if pgpsig.settings.DEBUG: # pragma: no cover
  LEVEL = logging.DEBUG
  FORMAT_STRING = FORMAT_DEBUG

else:
  LEVEL = logging.WARNING
  FORMAT_STRING = FORMAT_MESSAGE

FORMATTER = logging.Formatter(FORMAT_STRING)
HANDLER = logging.StreamHandler()
HANDLER.setFormatter(FORMATTER)
LOGGER.addHandler(HANDLER)
LOGGER.setLevel(LEVEL)
