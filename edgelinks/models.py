from dataclasses import dataclass
from enum import StrEnum


class LinkKind(StrEnum):
    CUSTOM = 'custom'  # Identifier supplied by the caller
    RANDOM = 'random'  # Identifier generated by the registry


# fmt: off
@dataclass(frozen=True)
class ShortLinkModel:
    identifier: str                     # Unique short identifier
    target: str                         # Original long URL


@dataclass(frozen=True)
class AllocationResult:
    identifier: str                     # Allocated identifier
    short_link: str                     # Fully qualified short link (base URL + identifier)
    kind: LinkKind                      # How the identifier was chosen
# fmt: on
