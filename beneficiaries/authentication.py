"""
Token authentication for registry operators.

Operators authenticate with DRF's database-backed tokens
(``rest_framework.authtoken``) sent as ``Authorization: Token <key>``.
Keeping the class in its own module gives settings a stable import
path that does not pull in any view code.
"""
from __future__ import annotations

from rest_framework import authentication


class TokenAuthentication(authentication.TokenAuthentication):
    """Token authentication using the ``Token`` keyword."""

    keyword = 'Token'
