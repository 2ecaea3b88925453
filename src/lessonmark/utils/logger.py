"""Logging helpers for lessonmark.

Every module logs through a standard library logger under the
``lessonmark`` namespace. The library installs no handlers of its own
beyond a NullHandler on the package logger, so output is entirely the
application's choice:

    >>> import logging
    >>> logging.getLogger("lessonmark").setLevel(logging.DEBUG)

Parser diagnostics (implicitly closed fences, pipe lines that did not
form a table) are emitted at DEBUG.
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "lessonmark"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the lessonmark namespace.

    Module names already under the package (``__name__`` from inside
    lessonmark) are used as-is; anything else is nested below it.

    Example:
        >>> get_logger("lessonmark.parser").name
        'lessonmark.parser'
        >>> get_logger("viewer").name
        'lessonmark.viewer'
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
