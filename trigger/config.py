from typing import Any, List, Optional
import json
import os
from pydantic import BaseModel, Field
from loguru import logger
from .events import Client
from .logging import setup_logging

# --- Settings Models ---
class TriggerSettings(BaseModel):
    enabled: bool = True

class LoggingSettings(BaseModel):
    debug_mode: bool = True
    log_dir: Optional[str] = None

class AppConfig(BaseModel):
    trigger: TriggerSettings = Field(default_factory=TriggerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

# --- Manager ---
class ConfigManager:
    """
    Manages configuration with persistence and change notification.

    Every successful update publishes "config:<section>" on ``on_changed``
    with data {"section", "key", "value"}. Listen to one section with
    ``on_changed.subscribe("config:logging", handler)``, or to all of them
    with ``subscribe(handler)``.
    """
    def __init__(self, filepath: str = "trigger.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = Client()
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, autosave, and publish the change."""
        if section not in AppConfig.model_fields:
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        validated = type(section_obj).model_validate({**section_obj.model_dump(), key: value})
        setattr(self._data, section, validated)
        self._save()
        self.on_changed.publish(f"config:{section}", {"section": section, "key": key, "value": getattr(validated, key)})

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def subscribe(self, handler: Any) -> Any:
        """Subscribe ``handler`` to changes in every section."""
        subscriber = None
        for section in AppConfig.model_fields:
            subscriber = self.on_changed.subscribe(f"config:{section}", subscriber or handler)
        return subscriber

    def setup_logging(self) -> List[int]:
        """Configure loguru from the logging section."""
        return setup_logging(**self._data.logging.model_dump())

    def build_client(self) -> Client:
        """Create a Client configured from the trigger section."""
        return Client.from_settings(self._data.trigger)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if os.path.isfile(self.filepath):
            try:
                if self.filepath.endswith('.toml'):
                    import tomllib
                    with open(self.filepath, "rb") as f:
                        raw = tomllib.load(f)
                else:
                    with open(self.filepath, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                self._data = AppConfig.model_validate(raw)
            except Exception as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
                self._save()
        else:
            self._save()

    def _save(self):
        """Persist current config to JSON file."""
        if self.filepath.endswith('.toml'):
            # tomllib is read-only; TOML files are never rewritten.
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except Exception as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
