"""Input validation for the link registry.

Functions:
    normalize_identifier(raw) -> str | None
        Trim a caller-supplied identifier; None means "not supplied".
    validate_identifier(identifier) -> str
        Enforce the identifier format (4-32 chars of [A-Za-z0-9_-]).
    validate_target_url(url) -> str
        Enforce an http:// or https:// target URL.

Example:
    >>> normalize_identifier('  my-link ')
    'my-link'
    >>> normalize_identifier('   ') is None
    True
    >>> validate_identifier('ab')
    Traceback (most recent call last):
        ...
    edgelinks.exceptions.InvalidIdentifierError: Identifier 'ab' is too short (minimum 4 characters).
"""

import re

from edgelinks.constants import Identifier
from edgelinks.exceptions import InvalidIdentifierError, InvalidUrlError


IDENTIFIER_RE = re.compile(Identifier.PATTERN)
ALLOWED_SCHEMES = ('http://', 'https://')


def normalize_identifier(raw: str | None) -> str | None:
    if raw is None:
        return None
    identifier = raw.strip()
    return identifier or None


def validate_identifier(identifier: str) -> str:
    """Validate a custom identifier against the identifier format.

    Case and character order are preserved; the identifier is returned as given.

    Raises:
        InvalidIdentifierError: with a reason naming the violated rule.
    """
    # fullmatch: `$` would also accept a trailing newline
    if IDENTIFIER_RE.fullmatch(identifier):
        return identifier

    if len(identifier) < Identifier.MIN_LENGTH:
        reason = f'is too short (minimum {Identifier.MIN_LENGTH} characters)'
    elif len(identifier) > Identifier.MAX_LENGTH:
        reason = f'is too long (maximum {Identifier.MAX_LENGTH} characters)'
    else:
        reason = 'contains disallowed characters (only letters, digits, "-" and "_")'
    raise InvalidIdentifierError(f"Identifier '{identifier}' {reason}.")


def validate_target_url(url: str | None) -> str:
    """Validate the target URL of a short link.

    Raises:
        InvalidUrlError: if the URL is missing or not http(s).
    """
    if not url:
        raise InvalidUrlError('A target URL is required.')
    if not url.startswith(ALLOWED_SCHEMES):
        raise InvalidUrlError(f"Target URL '{url}' must start with http:// or https://.")
    return url
