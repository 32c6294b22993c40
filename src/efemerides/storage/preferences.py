"""String key-value preferences persisted to a JSON file."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PreferencesStore:
    """Small persistent map of string keys to string values.

    The whole map lives in one JSON object file, rewritten on every change.
    The file and its parent directories are created on first write.
    """

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: Path to the JSON file backing the store.
        """
        self.path = Path(path)
        self._values: dict[str, str] | None = None

    def _read(self) -> dict[str, str]:
        """Load the map from disk, once."""
        if self._values is not None:
            return self._values

        values: dict[str, str] = {}
        if self.path.exists():
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    values = {str(k): v for k, v in data.items() if isinstance(v, str)}
                else:
                    logger.warning("Ignoring preferences file %s: not an object", self.path)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Ignoring unreadable preferences file %s: %s", self.path, e)

        self._values = values
        return values

    def _write(self, values: dict[str, str]) -> None:
        """Write values to disk, then make them the cached map.

        The cache is left untouched if the write fails.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(values, f, indent=2, ensure_ascii=False)
            tmp_path.replace(self.path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        self._values = values

    def get_string(self, key: str) -> str | None:
        """Return the value stored under key, or None."""
        return self._read().get(key)

    def set_string(self, key: str, value: str) -> None:
        """Store value under key and persist.

        Raises:
            OSError: If the file cannot be written.
        """
        values = dict(self._read())
        values[key] = value
        self._write(values)

    def contains(self, key: str) -> bool:
        """Check whether key has a value."""
        return key in self._read()

    def remove(self, key: str) -> bool:
        """Remove key. Returns True if it was present."""
        values = dict(self._read())
        if key not in values:
            return False
        del values[key]
        self._write(values)
        return True
