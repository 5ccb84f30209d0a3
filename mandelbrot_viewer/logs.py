"""Console logging for the viewer.

Informational messages are only printed when verbose output is enabled;
status, success and warning messages always go to stdout and errors to stderr.
"""

from __future__ import annotations

import sys

VERBOSE = False

_PREFIXES = {
    "info": "[info]",
    "status": "[status]",
    "success": "[ok]",
    "warn": "[warn]",
    "error": "[error]",
}


def set_verbose(enabled: bool) -> None:
    global VERBOSE
    VERBOSE = bool(enabled)


def log(message, level="info", **kwargs):
    if level not in _PREFIXES:
        raise ValueError(f"Unknown log level '{level}'.")
    if level == "info" and not VERBOSE:
        return
    stream = sys.stderr if level == "error" else sys.stdout
    print(_PREFIXES[level], message, file=stream, **kwargs)
