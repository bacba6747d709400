from enum import StrEnum


class Identifier:
    """Identifier allocation parameters."""

    MIN_LENGTH = 4
    MAX_LENGTH = 32
    PATTERN = r'^[A-Za-z0-9_-]{4,32}$'
    # No 0/O, 1/l/I
    SAFE_ALPHABET = 'ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnpqrstuvwxyz23456789'
    RANDOM_LENGTH = 6  # Length of system generated identifiers
    MAX_ATTEMPTS = 5  # Conditional write attempts before giving up on a random identifier
    # Paths browsers request on their own, never short links
    RESERVED = frozenset({'favicon.ico', 'robots.txt'})


class TTL:
    """TTL durations in seconds."""

    # Cache-Control max-age for successful redirects (1 day in seconds)
    REDIRECT_CACHE = 86_400  # 60 * 60 * 24


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'


# Base URL used when a request carries no domain (SAM CLI, tests, etc.)
LOCAL_BASE_URL = 'http://localhost:3000'

# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
