from pathlib import Path
from typing import Any, Optional

from loguru import logger
from pydantic import ValidationError

from ..config import Config
from ..errors import ConfigurationError
from ..models import AdrSettings
from ..utils import dumps, is_unescaped, legacy_value, safe_loads

MISSING_SETTINGS_MESSAGE = (
    "Expected to find an {name} file in the current directory. "
    "Use adr init in the project home directory to generate this file."
)


class SettingsStore:
    """Reads and writes the project settings file."""

    def __init__(self, root: Optional[Path] = None, filename: Optional[str] = None):
        self.root = Path(root) if root is not None else Path.cwd()
        self.filename = filename or Config.SETTINGS_FILE

    @property
    def settings_path(self) -> Path:
        return self.root / self.filename

    def exists(self) -> bool:
        return self.settings_path.is_file()

    def write(self, path: str) -> AdrSettings:
        settings = self._validate(path)
        self.settings_path.write_text(dumps(settings.model_dump()), encoding="utf-8")
        logger.info(f"[settings] saved path={settings.path} to {self.settings_path}")
        self._ensure_directory(settings)
        return settings

    def read(self) -> AdrSettings:
        if not self.exists():
            raise ConfigurationError(MISSING_SETTINGS_MESSAGE.format(name=self.filename))

        contents = self.settings_path.read_text(encoding="utf-8")
        path = self._extract_path(contents)
        if not path:
            raise ConfigurationError(f"Expected a 'path' settings in {self.filename}!")

        settings = self._validate(path)
        self._ensure_directory(settings)
        return settings

    def _extract_path(self, contents: str) -> Optional[str]:
        """Find the 'path' value, matching the key case-insensitively.

        A raw value with stray backslashes comes from an older version that
        wrote paths unescaped; it is used as-is rather than JSON-decoded.
        """
        raw = legacy_value(contents, "path")
        if raw is not None and is_unescaped(raw):
            logger.debug(f"[settings] {self.filename} holds an unescaped path; using legacy reader")
            return raw

        try:
            data: Any = safe_loads(contents)
        except ValueError:
            logger.debug(f"[settings] {self.filename} is not strict JSON; using legacy reader")
            return raw

        if not isinstance(data, dict):
            return None
        for key, value in data.items():
            if key.lower() == "path" and isinstance(value, str):
                return value
        return None

    def _validate(self, path: str) -> AdrSettings:
        try:
            return AdrSettings(path=path)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid 'path' setting {path!r}") from exc

    @staticmethod
    def _ensure_directory(settings: AdrSettings):
        if not settings.directory.is_dir():
            logger.info(f"[settings] creating records directory {settings.directory}")
        settings.ensure_directory()
