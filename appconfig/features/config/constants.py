"""Configuration defaults."""

DEFAULT_API_VERSION = "1.0"
DEFAULT_SCHEME = "https"
DEFAULT_TIMEOUT_SECONDS = 30.0

# Connection string segment names
CONNECTION_STRING_ENDPOINT = "Endpoint"
CONNECTION_STRING_ID = "Id"
CONNECTION_STRING_SECRET = "Secret"  # noqa: S105

COMPONENT_CONFIG = "config"
