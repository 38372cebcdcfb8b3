"""Default error sink for load and render failures."""

import logging

_log = logging.getLogger(__name__)


def notify(error: BaseException) -> None:
    """Report a recovered failure. Never raises."""
    _log.error("%s", error, exc_info=(type(error), error, error.__traceback__))
