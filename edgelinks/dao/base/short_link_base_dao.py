"""Abstract base class for ShortLink data access objects (DAOs).

This class establishes a consistent contract for all ShortLink DAO implementations,
regardless of the underlying key-value store (e.g., Redis, in-memory dict).

Responsibilities:
    - Provide an interface for writing and reading ShortLinkModel objects.
    - Offer both an unconditional upsert and a conditional ("put if absent") write.
    - Standardize error handling across multiple data store implementations.

The store is assumed to be eventually consistent: a write followed immediately
by a read of the same identifier is not guaranteed to observe the write.
Callers must treat the write acknowledgement alone as the success signal.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from edgelinks.models import ShortLinkModel
        >>> from edgelinks.dao import ShortLinkRedisDAO

        >>> dao = ShortLinkRedisDAO(...)

        >>> short_link = ShortLinkModel(
        ...     identifier="my-link",
        ...     target="https://example.com/a/b",
        ... )
        >>> dao.insert(short_link)

        >>> dao.get("my-link").target
        'https://example.com/a/b'
"""

from abc import ABC, abstractmethod

from edgelinks.models import ShortLinkModel


class ShortLinkBaseDAO(ABC):
    """Interface for ShortLink data access objects (DAOs).

    Methods:
        get(identifier: str, **kwargs) -> ShortLinkModel:
            Retrieve a ShortLinkModel by identifier.
            Raises ShortLinkNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

        put(short_link: ShortLinkModel, **kwargs) -> ShortLinkBaseDAO:
            Unconditionally write a mapping, overwriting any previous one.
            Raises DataStoreError on connection or write failure.

        insert(short_link: ShortLinkModel, **kwargs) -> ShortLinkBaseDAO:
            Write a mapping only if the identifier is free.
            Raises ShortLinkAlreadyExistsError if the identifier is taken.
            Raises DataStoreError on connection or write failure.

    NOTE:
        - Mappings are never deleted through the DAO. Removal is an
          administrative concern outside the application.
    """

    @abstractmethod
    def get(self, identifier: str, **kwargs) -> ShortLinkModel:
        """Retrieve a ShortLinkModel from the data store by its identifier.

        Args:
            identifier (str):
                The identifier of the ShortLinkModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortLinkModel: The stored mapping.

        Raises:
            ShortLinkNotFoundError:
                If no ShortLinkModel with the given identifier exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def put(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkBaseDAO':
        """Unconditionally write a ShortLinkModel into the data store.

        Args:
            short_link (ShortLinkModel):
                The mapping to be written.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortLinkBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def insert(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkBaseDAO':
        """Write a ShortLinkModel into the data store only if its identifier is free.

        The existence check and the write happen as one atomic step in the
        data store, so two concurrent inserts for the same identifier can
        never both succeed.

        Args:
            short_link (ShortLinkModel):
                The mapping to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortLinkBaseDAO: self (for method chaining)

        Raises:
            ShortLinkAlreadyExistsError:
                If a mapping with the same identifier already exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
