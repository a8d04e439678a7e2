"""
Logging support: extend Python logging to add a NOTICE level,
and enable sentry.io if configured.

MUST be imported (by some file) before ANY calls to getLogger
(palfilter/__init__.py does this first thing).
"""

import logging
import os
from typing import Optional

# PyPI:
try:
    import sentry_sdk
    import sentry_sdk.integrations.logging
except ModuleNotFoundError:
    sentry_sdk = None

# syslog "notice" level
NOTICE = (logging.WARNING + logging.INFO) // 2
logging.addLevelName(NOTICE, 'NOTICE')

if sentry_sdk:
    # logging level mapping for breadcrumbs:
    sentry_sdk.integrations.logging.LOGGING_TO_EVENT_LEVEL[NOTICE] = "warning"


class Logger(logging.Logger):
    """subclass of logging.Logger with notice method"""

    def notice(self, msg, *args, **kwargs):
        """
        Log 'msg % args' with severity 'NOTICE'.

        NOTICE syslog level is higher than INFO, but lower than
        WARNING and is defined as "normal but significant condition"
        """
        if self.isEnabledFor(NOTICE):
            self._log(NOTICE, msg, args, **kwargs)

logging.setLoggerClass(Logger)

logger = logging.getLogger(__name__)


def sentry_setup(release: Optional[str] = None) -> bool:
    """
    see if sentry_sdk available and SENTRY_DSN set in environment.
    Call AFTER logging up and running!
    Returns True if sentry_sdk.init was called.
    """

    dsn = os.environ.get('SENTRY_DSN')
    if not dsn:
        return False

    if not sentry_sdk:
        logger.error("SENTRY_DSN set, but sentry_sdk not available")
        return False

    environment = os.environ.get('SENTRY_ENVIRONMENT', 'production')
    logger.info("calling sentry_sdk.init (environment %s)", environment)
    sentry_sdk.init(dsn=dsn, environment=environment, release=release)
    return True
