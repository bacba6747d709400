"""Unit tests for the LinkRegistry

Test coverage includes:

1. Custom identifier allocation
   - Ensures a valid custom identifier is claimed with a conditional write.
   - Ensures surrounding whitespace is trimmed and case is preserved.
   - Ensures a taken identifier raises IdentifierTakenError and the original mapping survives.
   - Ensures a concurrent claim between lookup and write raises IdentifierTakenError.

2. Random identifier allocation
   - Ensures blank custom identifiers fall through to random generation.
   - Ensures collisions are retried with fresh identifiers.
   - Ensures AllocationExhaustedError after the attempt budget.

3. Validation happens before any store access
   - Invalid URLs and identifiers never reach the store.

4. Resolution
   - Returns the stored target URL.
   - Empty, reserved and unknown identifiers raise LinkNotFoundError.

5. Store failures
   - DataStoreError propagates unchanged from both paths.

6. End-to-end scenarios
"""

import re
from unittest.mock import MagicMock

import pytest

from edgelinks.models import AllocationResult, LinkKind, ShortLinkModel
from edgelinks.dao.base import ShortLinkBaseDAO
from edgelinks.dao.memory import ShortLinkMemoryDAO
from edgelinks.dao.exceptions import DataStoreError, ShortLinkAlreadyExistsError, ShortLinkNotFoundError
from edgelinks.exceptions import (
    AllocationExhaustedError,
    IdentifierTakenError,
    InvalidIdentifierError,
    InvalidUrlError,
    LinkNotFoundError,
)
from edgelinks.registry import LinkRegistry
from edgelinks.registry.generator import SAFE_ALPHABET


BASE_URL = 'https://sho.rt'


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def store():
    return ShortLinkMemoryDAO()


@pytest.fixture
def registry(store):
    return LinkRegistry(store, base_url=BASE_URL)


@pytest.fixture
def dao():
    """Mock DAO where every identifier is free."""
    _dao = MagicMock(spec=ShortLinkBaseDAO)
    _dao.get.side_effect = ShortLinkNotFoundError()
    return _dao


@pytest.fixture
def mocked_registry(dao):
    return LinkRegistry(dao, base_url=BASE_URL)


def sequence_generator(*identifiers):
    """Return a generator stand-in that yields `identifiers` in order."""
    queue = iter(identifiers)
    return lambda length: next(queue)


# -------------------------------
# 1. Custom identifier allocation
# -------------------------------


def test_allocate_custom_identifier(mocked_registry, dao):
    result = mocked_registry.allocate('https://example.com/a/b', 'my-link')

    assert result == AllocationResult(identifier='my-link', short_link=f'{BASE_URL}/my-link', kind=LinkKind.CUSTOM)
    dao.get.assert_called_once_with('my-link')
    dao.insert.assert_called_once_with(ShortLinkModel(identifier='my-link', target='https://example.com/a/b'))
    dao.put.assert_not_called()


def test_allocate_custom_identifier_is_trimmed_and_case_preserved(registry, store):
    result = registry.allocate('https://example.com', '  MyLink_42 ')

    assert result.identifier == 'MyLink_42'
    assert result.kind == LinkKind.CUSTOM
    assert store.links == {'MyLink_42': 'https://example.com'}


def test_allocate_custom_identifier_which_is_taken(registry, store):
    registry.allocate('https://example.com/original', 'abcd')

    with pytest.raises(IdentifierTakenError, match=re.escape("Identifier 'abcd' is already taken.")):
        registry.allocate('https://example.com/other', 'abcd')

    assert registry.resolve('abcd') == 'https://example.com/original'


def test_allocate_same_custom_identifier_twice_is_deterministically_taken(registry):
    registry.allocate('https://example.com', 'abcd')

    for _ in range(3):
        with pytest.raises(IdentifierTakenError):
            registry.allocate('https://example.com', 'abcd')


def test_allocate_custom_identifier_claimed_concurrently(mocked_registry, dao):
    """The lookup saw a free identifier, but another request won the conditional write."""
    dao.insert.side_effect = ShortLinkAlreadyExistsError()

    with pytest.raises(IdentifierTakenError):
        mocked_registry.allocate('https://example.com', 'abcd')

    dao.put.assert_not_called()


def test_allocate_custom_identifier_does_not_read_back(mocked_registry, dao):
    """The write acknowledgement is the success signal, no verification read follows."""
    mocked_registry.allocate('https://example.com', 'abcd')

    assert dao.get.call_count == 1


# -------------------------------
# 2. Random identifier allocation
# -------------------------------


@pytest.mark.parametrize('custom_id', [None, '', '   '])
def test_allocate_random_identifier(registry, store, custom_id):
    result = registry.allocate('https://example.com/a', custom_id)

    assert result.kind == LinkKind.RANDOM
    assert len(result.identifier) == 6
    assert set(result.identifier) <= set(SAFE_ALPHABET)
    assert result.short_link == f'{BASE_URL}/{result.identifier}'
    assert store.links == {result.identifier: 'https://example.com/a'}


def test_allocate_random_identifier_uses_conditional_write(mocked_registry, dao):
    mocked_registry.allocate('https://example.com')

    dao.insert.assert_called_once()
    dao.get.assert_not_called()
    dao.put.assert_not_called()


def test_allocate_random_identifier_retries_on_collision(store):
    store.put(ShortLinkModel(identifier='taken1', target='https://example.com/first'))
    store.put(ShortLinkModel(identifier='taken2', target='https://example.com/second'))
    registry = LinkRegistry(store, base_url=BASE_URL, generator=sequence_generator('taken1', 'taken2', 'free01'))

    result = registry.allocate('https://example.com/third')

    assert result.identifier == 'free01'
    assert store.links['taken1'] == 'https://example.com/first'
    assert store.links['taken2'] == 'https://example.com/second'
    assert store.links['free01'] == 'https://example.com/third'


def test_allocate_random_identifier_exhausted(dao):
    dao.insert.side_effect = ShortLinkAlreadyExistsError()
    registry = LinkRegistry(dao, base_url=BASE_URL, max_attempts=3)

    with pytest.raises(AllocationExhaustedError, match='No free identifier found after 3 attempts.'):
        registry.allocate('https://example.com')

    assert dao.insert.call_count == 3


def test_allocate_random_identifier_passes_configured_length(dao):
    lengths = []

    def generator(length):
        lengths.append(length)
        return 'x' * length

    registry = LinkRegistry(dao, identifier_length=8, generator=generator)

    assert registry.allocate('https://example.com').identifier == 'xxxxxxxx'
    assert lengths == [8]


def test_allocate_random_identifiers_are_distinct(registry):
    """Flaky by design: random identifiers may repeat, just very rarely."""
    identifiers = {registry.allocate('https://example.com').identifier for _ in range(1000)}
    assert len(identifiers) == 1000


@pytest.mark.parametrize('max_attempts', [0, -1])
def test_registry_rejects_non_positive_max_attempts(dao, max_attempts):
    with pytest.raises(ValueError, match='max_attempts must be a positive integer'):
        LinkRegistry(dao, max_attempts=max_attempts)


# -------------------------------
# 3. Validation before store access
# -------------------------------


@pytest.mark.parametrize('target_url', [None, '', 'ftp://x.com', 'example.com'])
@pytest.mark.parametrize('custom_id', [None, 'abcd', 'ab'])
def test_allocate_invalid_url(mocked_registry, dao, target_url, custom_id):
    """An invalid URL is rejected regardless of the custom identifier."""
    with pytest.raises(InvalidUrlError):
        mocked_registry.allocate(target_url, custom_id)

    assert dao.method_calls == []


@pytest.mark.parametrize('custom_id', ['ab', 'abc', ' ab ', 'a' * 33, 'my link', 'my.link', 'émoji'])
def test_allocate_invalid_identifier(mocked_registry, dao, custom_id):
    with pytest.raises(InvalidIdentifierError):
        mocked_registry.allocate('https://example.com', custom_id)

    assert dao.method_calls == []


# -------------------------------
# 4. Resolution
# -------------------------------


def test_resolve_returns_target(registry):
    result = registry.allocate('https://example.com/target')
    assert registry.resolve(result.identifier) == 'https://example.com/target'


def test_resolve_is_case_sensitive(registry):
    registry.allocate('https://example.com', 'abcd')

    with pytest.raises(LinkNotFoundError):
        registry.resolve('ABCD')


@pytest.mark.parametrize('identifier', ['', 'favicon.ico', 'robots.txt'])
def test_resolve_sentinel_does_not_query_store(mocked_registry, dao, identifier):
    with pytest.raises(LinkNotFoundError):
        mocked_registry.resolve(identifier)

    dao.get.assert_not_called()


def test_resolve_unknown_identifier(mocked_registry, dao):
    with pytest.raises(LinkNotFoundError, match="Short link 'never-created' doesn't exist."):
        mocked_registry.resolve('never-created')

    dao.get.assert_called_once_with('never-created')


def test_resolve_does_not_write(mocked_registry, dao):
    dao.get.side_effect = None
    dao.get.return_value = ShortLinkModel(identifier='abcd', target='https://example.com')

    assert mocked_registry.resolve('abcd') == 'https://example.com'
    dao.put.assert_not_called()
    dao.insert.assert_not_called()


# -------------------------------
# 5. Store failures
# -------------------------------


def test_allocate_propagates_store_unavailable_on_lookup(mocked_registry, dao):
    error = DataStoreError("Can't connect to Redis at localhost:6379/0.")
    dao.get.side_effect = error

    with pytest.raises(DataStoreError) as exc_info:
        mocked_registry.allocate('https://example.com', 'abcd')

    assert exc_info.value is error
    dao.insert.assert_not_called()


def test_allocate_propagates_store_unavailable_on_write(mocked_registry, dao):
    error = DataStoreError("Can't connect to Redis at localhost:6379/0.")
    dao.insert.side_effect = error

    with pytest.raises(DataStoreError) as exc_info:
        mocked_registry.allocate('https://example.com')

    assert exc_info.value is error
    assert dao.insert.call_count == 1  # not retried locally


def test_resolve_propagates_store_unavailable(mocked_registry, dao):
    dao.get.side_effect = DataStoreError('down')

    with pytest.raises(DataStoreError):
        mocked_registry.resolve('abcd')


# -------------------------------
# 6. End-to-end scenarios
# -------------------------------


def test_end_to_end_custom_link(registry):
    result = registry.allocate('https://example.com/a/b', 'my-link')

    assert result.identifier == 'my-link'
    assert result.short_link.endswith('/my-link')
    assert result.kind == 'custom'
    assert registry.resolve('my-link') == 'https://example.com/a/b'


def test_end_to_end_ftp_url_is_invalid(registry):
    with pytest.raises(InvalidUrlError):
        registry.allocate('ftp://x.com', '')


def test_end_to_end_short_identifier_is_invalid(registry):
    with pytest.raises(InvalidIdentifierError, match='too short'):
        registry.allocate('https://x.com', 'ab')


def test_end_to_end_never_created(registry):
    with pytest.raises(LinkNotFoundError):
        registry.resolve('never-created')


def test_base_url_trailing_slash_is_stripped(store):
    registry = LinkRegistry(store, base_url='https://sho.rt/')
    assert registry.allocate('https://example.com', 'abcd').short_link == 'https://sho.rt/abcd'
