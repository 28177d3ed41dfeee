import json
import sys

import pytest
from loguru import logger
from pydantic import ValidationError

from trigger import AppConfig, ConfigManager


@pytest.fixture
def config(tmp_path):
    return ConfigManager(str(tmp_path / "trigger.json"))


def test_config_read_default(config):
    assert config.data.trigger.enabled is True
    assert config.get("logging", "debug_mode") is True


def test_missing_file_is_created_with_defaults(tmp_path):
    path = tmp_path / "nested" / "trigger.json"
    ConfigManager(str(path))
    assert json.loads(path.read_text(encoding="utf-8")) == AppConfig().model_dump()


def test_load_json(tmp_path):
    path = tmp_path / "trigger.json"
    path.write_text(json.dumps({"trigger": {"enabled": False}}), encoding="utf-8")
    config = ConfigManager(str(path))
    assert config.data.trigger.enabled is False
    assert config.build_client().disabled is True


def test_load_toml(tmp_path):
    path = tmp_path / "trigger.toml"
    path.write_text('[trigger]\nenabled = false\n\n[logging]\ndebug_mode = false\n', encoding="utf-8")
    config = ConfigManager(str(path))
    assert config.data.trigger.enabled is False
    assert config.data.logging.debug_mode is False


def test_invalid_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "trigger.json"
    path.write_text("{not json", encoding="utf-8")
    config = ConfigManager(str(path))
    assert config.data == AppConfig()
    assert "Failed to load config" in caplog.text


def test_config_update_event(config):
    received = []
    config.on_changed.subscribe("config:trigger", received.append)

    config.update("trigger", "enabled", False)

    assert config.data.trigger.enabled is False
    assert received[-1].full_name == "config:trigger"
    assert dict(received[-1].data) == {"section": "trigger", "key": "enabled", "value": False}


def test_config_update_section_subscription(config):
    received = []
    config.on_changed.subscribe("config:logging", received.append)

    config.update("trigger", "enabled", False)
    config.update("logging", "log_dir", "logs")

    assert [event["key"] for event in received] == ["log_dir"]


def test_config_update_is_persisted(config):
    config.update("logging", "debug_mode", False)
    assert ConfigManager(config.filepath).data.logging.debug_mode is False


def test_config_update_rejects_unknown_names(config):
    with pytest.raises(ValueError):
        config.update("missing", "enabled", True)
    with pytest.raises(ValueError):
        config.update("trigger", "missing", True)


def test_config_update_validates_value(config):
    with pytest.raises(ValidationError):
        config.update("trigger", "enabled", "definitely not a bool")
    assert config.data.trigger.enabled is True


def test_config_subscribe_to_every_section(config):
    received = []
    subscriber = config.subscribe(received.append)

    config.update("trigger", "enabled", False)
    config.update("logging", "debug_mode", False)

    assert [event.full_name for event in received] == ["config:trigger", "config:logging"]
    assert config.on_changed.subscribers_for("config") == [subscriber, subscriber]


def test_plain_config_listener_hears_nothing(config):
    received = []
    config.on_changed.subscribe("config", received.append)
    config.update("trigger", "enabled", False)
    assert received == []


def test_setup_logging_from_config(config, tmp_path):
    config.update("logging", "log_dir", str(tmp_path / "logs"))
    config.update("logging", "debug_mode", False)

    sink_ids = config.setup_logging()
    try:
        assert len(sink_ids) == 2
        logger.debug("from config")
    finally:
        logger.remove()
        logger.add(sys.stderr)

    log_file = next((tmp_path / "logs").glob("trigger_*.log"))
    content = log_file.read_text(encoding="utf-8")
    assert "debug=False" in content
    assert "from config" in content
