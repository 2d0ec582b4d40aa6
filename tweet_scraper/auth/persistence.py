"""Header persistence.

Headers are stored as UTF-8 text, one ``name=value`` pair per line. The first
``=`` separates name and value, blank lines are ignored on load and header
names are lower-cased.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path

from ..core.exceptions import HeaderLoadError, HeaderSaveError
from .context import AuthContext

logger = logging.getLogger(__name__)

# RFC 9110 token characters
_HEADER_NAME = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


def _check_header(name: str, value: str) -> str | None:
    """Return a reason if the header cannot be stored, None otherwise."""
    if not _HEADER_NAME.fullmatch(name):
        return f"invalid header name: {name!r}"
    if "\r" in value or "\n" in value or "\0" in value:
        return f"invalid value for header {name!r}"
    return None


def save_headers(headers: Mapping[str, str], path: str | Path) -> None:
    """Write headers to ``path``, one ``name=value`` per line.

    Raises:
        HeaderSaveError: Header cannot be represented or the file cannot be written
    """
    lines = []
    for name, value in headers.items():
        reason = _check_header(name, value)
        if reason:
            raise HeaderSaveError(reason, path)
        lines.append(f"{name}={value}\n")

    try:
        Path(path).write_text("".join(lines), encoding="utf-8")
    except OSError as e:
        raise HeaderSaveError(str(e), path) from e
    logger.info("headers_saved", extra={"path": str(path), "count": len(lines)})


def load_headers(path: str | Path) -> dict[str, str]:
    """Read headers written by ``save_headers``.

    Raises:
        HeaderLoadError: File cannot be read or a line is malformed
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise HeaderLoadError(str(e), path) from e

    headers: dict[str, str] = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        name, sep, value = line.partition("=")
        if not sep:
            raise HeaderLoadError(f"invalid line {lineno}: no '=' found", path)
        reason = _check_header(name, value)
        if reason:
            raise HeaderLoadError(f"line {lineno}: {reason}", path)
        headers[name.lower()] = value

    logger.info("headers_loaded", extra={"path": str(path), "count": len(headers)})
    return headers


def save_auth(auth: AuthContext, path: str | Path) -> None:
    save_headers(auth.headers, path)


def load_auth(path: str | Path) -> AuthContext:
    """Load persisted headers and check they carry usable credentials."""
    return AuthContext.from_headers(load_headers(path))
