"""Identifier allocation and resolution policy

LinkRegistry is a stateless policy layer over a ShortLinkBaseDAO. It decides
which identifier a new link gets and maps identifiers back to target URLs;
the DAO owns the records.

Allocation procedure:
    - Step 1: Validate the target URL
    - Step 2: Validate the custom identifier (if one is supplied)
    - Step 3: Reject a custom identifier that is already taken
    - Step 4: Claim the identifier with a conditional write
              (random identifiers are regenerated on collision)
    - Step 5: Return identifier, short link and kind

All validation happens before the first write, so a rejected request never
leaves a partial record behind. The write acknowledgement is the success
signal; the store is not re-read to confirm it.

Example:
    >>> from edgelinks.dao import ShortLinkMemoryDAO
    >>> registry = LinkRegistry(ShortLinkMemoryDAO(), base_url='https://sho.rt')
    >>> registry.allocate('https://example.com/a/b', 'my-link')
    AllocationResult(identifier='my-link', short_link='https://sho.rt/my-link', kind=<LinkKind.CUSTOM: 'custom'>)
    >>> registry.resolve('my-link')
    'https://example.com/a/b'
"""

import logging
from collections.abc import Callable

from beartype import beartype

from edgelinks.constants import Identifier, LOCAL_BASE_URL
from edgelinks.models import AllocationResult, LinkKind, ShortLinkModel
from edgelinks.dao.base import ShortLinkBaseDAO
from edgelinks.dao.exceptions import ShortLinkAlreadyExistsError, ShortLinkNotFoundError
from edgelinks.exceptions import AllocationExhaustedError, IdentifierTakenError, LinkNotFoundError
from edgelinks.registry.generator import generate_identifier
from edgelinks.registry.validators import normalize_identifier, validate_identifier, validate_target_url


logger = logging.getLogger(__name__)


class LinkRegistry:
    """Allocate identifiers for target URLs and resolve them back.

    Attributes:
        dao (ShortLinkBaseDAO):
            Key-value store holding identifier -> target URL mappings.
        base_url (str):
            Scheme and host prepended to identifiers to build short links.
        max_attempts (int):
            Conditional write attempts for a random identifier before
            AllocationExhaustedError is raised.
        identifier_length (int):
            Length of random identifiers.

    Methods:
        allocate(target_url, custom_id=None) -> AllocationResult:
            Raises InvalidUrlError, InvalidIdentifierError, IdentifierTakenError,
            AllocationExhaustedError, or DataStoreError.

        resolve(identifier) -> str:
            Raises LinkNotFoundError or DataStoreError.
    """

    def __init__(
        self,
        dao: ShortLinkBaseDAO,
        base_url: str = LOCAL_BASE_URL,
        max_attempts: int = Identifier.MAX_ATTEMPTS,
        identifier_length: int = Identifier.RANDOM_LENGTH,
        generator: Callable[[int], str] = generate_identifier,
    ):
        if max_attempts < 1:
            raise ValueError(f'max_attempts must be a positive integer (given value: {max_attempts}).')

        self.dao = dao
        self.base_url = base_url.rstrip('/')
        self.max_attempts = max_attempts
        self.identifier_length = identifier_length
        self.generator = generator

    def short_link(self, identifier: str) -> str:
        return f'{self.base_url}/{identifier}'

    @beartype
    def allocate(self, target_url: str | None, custom_id: str | None = None) -> AllocationResult:
        """Allocate an identifier for `target_url`

        A blank `custom_id` (empty or whitespace only) counts as not supplied
        and a random identifier is generated instead.

        Args:
            target_url (str | None):
                Long URL the identifier should redirect to.
            custom_id (str | None):
                Caller-supplied identifier, surrounding whitespace is trimmed.

        Returns:
            AllocationResult: identifier, fully qualified short link and kind.

        Raises:
            InvalidUrlError:
                If the target URL is missing or not http(s).
            InvalidIdentifierError:
                If the custom identifier does not match the identifier format.
            IdentifierTakenError:
                If the custom identifier is already allocated.
            AllocationExhaustedError:
                If every random identifier attempt collided.
            DataStoreError:
                If the store is unavailable (propagated as is).
        """
        # 1- Validate inputs before touching the store
        target_url = validate_target_url(target_url)
        identifier = normalize_identifier(custom_id)

        # 2- Custom identifier: validate, check for conflicts, claim
        if identifier is not None:
            validate_identifier(identifier)
            self._claim_custom(identifier, target_url)
            kind = LinkKind.CUSTOM

        # 3- No custom identifier: generate and claim a random one
        else:
            identifier = self._claim_random(target_url)
            kind = LinkKind.RANDOM

        logger.info(
            'Allocated short link.',
            extra={'identifier': identifier, 'kind': str(kind), 'event': 'LINK_CREATED'},
        )
        return AllocationResult(identifier=identifier, short_link=self.short_link(identifier), kind=kind)

    @beartype
    def resolve(self, identifier: str) -> str:
        """Resolve an identifier to its target URL

        Empty and reserved identifiers (e.g. 'favicon.ico') are reported as
        not found without querying the store.

        Raises:
            LinkNotFoundError:
                If the identifier is empty, reserved, or not allocated.
            DataStoreError:
                If the store is unavailable (propagated as is).
        """
        if not identifier or identifier in Identifier.RESERVED:
            raise LinkNotFoundError(f"Short link '{identifier}' doesn't exist.")

        try:
            short_link = self.dao.get(identifier)
        except ShortLinkNotFoundError as e:
            raise LinkNotFoundError(f"Short link '{identifier}' doesn't exist.") from e

        return short_link.target

    def _claim_custom(self, identifier: str, target_url: str) -> None:
        try:
            self.dao.get(identifier)
        except ShortLinkNotFoundError:
            pass
        else:
            logger.info('Custom identifier already taken.', extra={'identifier': identifier, 'event': 'IDENTIFIER_TAKEN'})
            raise IdentifierTakenError(f"Identifier '{identifier}' is already taken.")

        # NOTE: the lookup above only produces a friendly early answer. The
        #       conditional insert is what actually guarantees an existing
        #       mapping is never overwritten, since a concurrent request may
        #       claim the identifier between the two calls.
        try:
            self.dao.insert(ShortLinkModel(identifier=identifier, target=target_url))
        except ShortLinkAlreadyExistsError as e:
            logger.info(
                'Custom identifier claimed concurrently.',
                extra={'identifier': identifier, 'event': 'IDENTIFIER_TAKEN'},
            )
            raise IdentifierTakenError(f"Identifier '{identifier}' is already taken.") from e

    def _claim_random(self, target_url: str) -> str:
        for attempt in range(1, self.max_attempts + 1):
            identifier = self.generator(self.identifier_length)
            try:
                self.dao.insert(ShortLinkModel(identifier=identifier, target=target_url))
            except ShortLinkAlreadyExistsError:
                logger.warning(
                    'Random identifier collision, retrying.',
                    extra={'identifier': identifier, 'attempt': attempt, 'event': 'IDENTIFIER_COLLISION'},
                )
            else:
                return identifier

        logger.error(
            'No free random identifier found.',
            extra={'attempts': self.max_attempts, 'event': 'ALLOCATION_EXHAUSTED'},
        )
        raise AllocationExhaustedError(f'No free identifier found after {self.max_attempts} attempts.')
