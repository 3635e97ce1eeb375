"""
Environment details embedded in reports.

Reports only use these values cosmetically. Detection is best-effort:
anything that cannot be determined is left empty.
"""

import getpass
import logging
import os
import platform
import socket
import sys
from collections.abc import Callable, Mapping

from attrs import frozen

logger = logging.getLogger(__name__)

LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")


def _best_effort(lookup: Callable[[], str | None], what: str) -> str:
    try:
        return lookup() or ""
    except (OSError, KeyError, ValueError) as e:
        logger.debug("Could not determine %s: %s", what, e)
        return ""


def split_user_and_domain(username: str) -> tuple[str, str]:
    """
    Split a ``DOMAIN\\user`` account name.

    Returns:
        (domain, user); domain is empty when the name has none
    """
    parts = username.split("\\")
    if len(parts) == 2:
        return parts[0], parts[1]
    return "", parts[0]


def parse_locale_name(name: str | None) -> tuple[str, str]:
    """
    Derive the language and IETF tag from a POSIX locale name.

    Examples:
        "en_US.UTF-8" -> ("en", "en-US")
        "C" -> ("", "")
    """
    if not name:
        return "", ""
    name = name.split(".")[0].split("@")[0]
    if name in ("C", "POSIX"):
        return "", ""
    return name.split("_")[0], name.replace("_", "-")


def detect_locale_name(environ: Mapping[str, str] | None = None) -> str | None:
    environ = os.environ if environ is None else environ
    for var in LOCALE_ENV_VARS:
        if environ.get(var):
            return environ[var]
    import locale

    return locale.getlocale()[0]


def runtime_platform() -> str:
    return f"python{platform.python_version()}.{sys.platform}-{platform.machine()}"


@frozen
class EnvironmentInfo:
    """Host details written into the report's environment and culture blocks."""

    cwd: str = ""
    machine_name: str = ""
    user: str = ""
    user_domain: str = ""
    platform: str = ""
    current_culture: str = ""
    current_ui_culture: str = ""

    @classmethod
    def detect(cls) -> "EnvironmentInfo":
        """Read the details of the current process, leaving unknown ones empty."""
        domain, user = split_user_and_domain(_best_effort(getpass.getuser, "user"))
        culture, ui_culture = parse_locale_name(
            _best_effort(detect_locale_name, "locale")
        )
        return cls(
            cwd=_best_effort(os.getcwd, "working directory"),
            machine_name=_best_effort(socket.gethostname, "host name"),
            user=user,
            user_domain=domain,
            platform=_best_effort(runtime_platform, "platform"),
            current_culture=culture,
            current_ui_culture=ui_culture,
        )
