from edgelinks.registry.validators import normalize_identifier, validate_identifier, validate_target_url
from edgelinks.registry.generator import generate_identifier
from edgelinks.registry.link_registry import LinkRegistry


__all__ = [
    'normalize_identifier',
    'validate_identifier',
    'validate_target_url',
    'generate_identifier',
    'LinkRegistry',
]
