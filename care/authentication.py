"""
Token authentication for the clinic API.

Kept apart from the auth views so REST framework can import the class
from settings without pulling in models of the views module.
"""
from __future__ import annotations

from rest_framework import authentication


class TokenAuthentication(authentication.TokenAuthentication):
    """``Authorization: Token <key>`` as returned by the login endpoint.

    Bearer JWTs are handled by SimpleJWT's own class, listed after this one
    in ``DEFAULT_AUTHENTICATION_CLASSES``.
    """

    keyword = 'Token'
