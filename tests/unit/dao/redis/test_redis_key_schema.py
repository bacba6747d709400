"""Unit tests for the RedisKeySchema class in redis_key_schema.py.

Test coverage includes:

1. Link URL key generation (with and without prefix)
2. Invalid prefix types
"""

import pytest

from edgelinks.dao.redis.redis_key_schema import RedisKeySchema


# -------------------------------
# 1. Link URL key generation
# -------------------------------


@pytest.mark.parametrize(
    'prefix, identifier, expected',
    [
        (None, 'abc123', 'links:abc123:url'),
        (None, 'my_Link-42', 'links:my_Link-42:url'),
        ('edgelinks:prod', 'abc123', 'edgelinks:prod:links:abc123:url'),
        ('tenant-a:edgelinks:dev', 'XyZ789', 'tenant-a:edgelinks:dev:links:XyZ789:url'),
    ],
)
def test_link_url_key(prefix, identifier, expected):
    """Ensure link_url_key() generates namespaced Redis keys."""
    keys = RedisKeySchema(prefix=prefix)
    assert keys.link_url_key(identifier) == expected


# -------------------------------
# 2. Invalid prefix types
# -------------------------------


@pytest.mark.parametrize('prefix', [123, ['edgelinks'], {'app': 'edgelinks'}])
def test_invalid_prefix_type(prefix):
    """Ensure non-string prefixes raise TypeError."""
    with pytest.raises(TypeError, match='Prefix must be of type string'):
        RedisKeySchema(prefix=prefix)
