"""Service for user interface preferences."""

from smartdash_cli.services.local_storage import LocalStorage

DARK_MODE_KEY = "darkMode"


class PreferencesService:
    """Persisted UI preferences (currently just dark mode)."""

    def __init__(self, storage: LocalStorage):
        self._storage = storage

    @property
    def dark_mode(self) -> bool:
        """Whether the dark theme is selected. Stored as ``"true"``/``"false"``."""
        return self._storage.get_item(DARK_MODE_KEY) == "true"

    @dark_mode.setter
    def dark_mode(self, enabled: bool) -> None:
        self._storage.set_item(DARK_MODE_KEY, "true" if enabled else "false")
