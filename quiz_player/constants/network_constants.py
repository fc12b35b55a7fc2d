"""Network configuration constants for the web player."""

DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8000
HTTP_FETCH_TIMEOUT_SECONDS: float = 10.0
