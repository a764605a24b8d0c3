"""Share token generation utility

This module provides the generator for share tokens. A share token is the only
credential a viewer needs to read a shared document, so it must be
unguessable: tokens are drawn from the operating system's CSPRNG (`secrets`)
and encoded as unpadded base64url so they can be embedded directly in a URL
path segment.

Functions:
    generate_token(byte_length=18):
        Generate a random URL-safe token from `byte_length` random bytes.

    is_token_well_formed(token):
        Check whether a string could be a token produced by generate_token().

Example:
    >>> from sharelinks.utils import generate_token
    >>> token = generate_token()
    >>> len(token)
    24
    >>> is_token_well_formed(token)
    True
"""

import re
import base64
import secrets

from sharelinks.utils.constants import DEFAULT_TOKEN_BYTES, MIN_TOKEN_BYTES


# base64url alphabet without padding, 16 to 128 characters
TOKEN_PATTERN = re.compile(r'^[A-Za-z0-9_-]{16,128}$')


def generate_token(byte_length: int = DEFAULT_TOKEN_BYTES) -> str:
    """Generate an unguessable, URL-safe share token.

    Args:
        byte_length (int, optional):
            Number of random bytes drawn from the CSPRNG.
            Defaults to 18 (144 bits, 24 encoded characters).
            Must be at least 16 (128 bits).

    Returns:
        str: base64url-encoded token without '=' padding. Only contains
             characters from [A-Za-z0-9_-].

    Raises:
        TypeError: If byte_length is not an integer.
        ValueError: If byte_length is below 16.

    Example:
        >>> generate_token(16)
        'q0Xy3k1Zb7nF2pWc9sLhVg'
    """
    if not isinstance(byte_length, int) or isinstance(byte_length, bool):
        raise TypeError(f'Byte length must be of type integer (given type: {type(byte_length)}).')
    if byte_length < MIN_TOKEN_BYTES:
        raise ValueError(f'Byte length must be at least {MIN_TOKEN_BYTES} (given value: {byte_length}).')

    return base64.urlsafe_b64encode(secrets.token_bytes(byte_length)).rstrip(b'=').decode('ascii')


def is_token_well_formed(token: object) -> bool:
    """Check whether a value has the shape of a share token.

    Used to reject garbage path parameters before they reach the data store.
    """
    return isinstance(token, str) and TOKEN_PATTERN.fullmatch(token) is not None
