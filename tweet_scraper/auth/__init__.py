"""Credential acquisition and persistence."""

from .bootstrap import bootstrap_auth, fetch_guest_token
from .context import AuthContext
from .persistence import load_auth, load_headers, save_auth, save_headers

__all__ = [
    "AuthContext",
    "bootstrap_auth",
    "fetch_guest_token",
    "load_auth",
    "load_headers",
    "save_auth",
    "save_headers",
]
