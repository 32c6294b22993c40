"""Application configuration loaded from environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_API_URL = "http://10.0.2.2:8000"
DEFAULT_DATA_DIR = Path.home() / ".efemerides"


@dataclass
class AppConfig:
    """Configuration for the app.

    Attributes:
        api_url: Base URL of the efemérides API, without trailing slash.
        data_dir: Directory holding preferences and logs.
        http_timeout: Seconds allowed for one API request.
    """

    api_url: str = DEFAULT_API_URL
    data_dir: Path = DEFAULT_DATA_DIR
    http_timeout: float = 10.0

    def __post_init__(self) -> None:
        self.api_url = self.api_url.rstrip("/")
        self.data_dir = Path(self.data_dir).expanduser()
        if self.http_timeout <= 0:
            raise ValueError("http_timeout must be positive")

    @property
    def preferences_path(self) -> Path:
        """File backing the key-value preferences."""
        return self.data_dir / "preferences.json"

    @property
    def log_dir(self) -> Path:
        """Directory for the JSONL event log."""
        return self.data_dir / "logs"


def config_from_env() -> AppConfig:
    """Load configuration from environment variables.

    Raises:
        ValueError: If EFEMERIDES_HTTP_TIMEOUT is not a positive number.
    """
    raw_timeout = os.getenv("EFEMERIDES_HTTP_TIMEOUT", "10")
    try:
        http_timeout = float(raw_timeout)
    except ValueError:
        raise ValueError(
            f"EFEMERIDES_HTTP_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
        ) from None

    return AppConfig(
        api_url=os.getenv("API_URL") or DEFAULT_API_URL,
        data_dir=Path(os.getenv("EFEMERIDES_HOME", str(DEFAULT_DATA_DIR))),
        http_timeout=http_timeout,
    )
