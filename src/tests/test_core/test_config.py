import pytest
import json
import os
from pathlib import Path

import yaml

from connects.core.config import Config, ConfigError

@pytest.fixture
def sample_config():
    """Fixture providing a sample configuration"""
    return {
        "app": {
            "name": "connects-test",
            "debug": True
        },
        "logging": {
            "level": "DEBUG",
            "backup_count": 5
        },
        "surepass": {
            "token": "sp-token",
            "mode": "PRODUCTION"
        },
        "openexchange": {
            "app_id": "oxr-app",
            "base_currency": "EUR"
        }
    }

@pytest.fixture
def config_file(tmp_path, sample_config):
    """Fixture creating a temporary JSON config file"""
    config_path = tmp_path / "test_config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config, f)
    return config_path

def test_config_loading(config_file):
    """Test basic configuration loading from file"""
    config = Config(config_file)
    assert config.get("app.name") == "connects-test"
    assert config.get("surepass.token") == "sp-token"
    assert config.get("surepass.mode") == "PRODUCTION"
    assert config.get("logging.backup_count") == 5
    # Keys missing from the file keep their defaults
    assert config.get("surepass.version") == "v1"
    assert config.get("aptos.network") == "MAINNET"

def test_yaml_config_loading(tmp_path, sample_config):
    """Test configuration loading from a YAML file"""
    config_path = tmp_path / "config.yaml"
    with open(config_path, "w") as f:
        yaml.safe_dump(sample_config, f)

    config = Config(config_path)
    assert config.get("openexchange.app_id") == "oxr-app"
    assert config.get("openexchange.base_currency") == "EUR"

def test_environment_variables():
    """Test environment variable overrides"""
    os.environ["CONNECTS_OPENEXCHANGE_APP_ID"] = "from-env"
    os.environ["CONNECTS_LOGGING_LEVEL"] = "DEBUG"
    os.environ["CONNECTS_APTOS_TIMEOUT"] = "2.5"

    config = Config()

    assert config.get("openexchange.app_id") == "from-env"
    assert config.get("logging.level") == "DEBUG"
    assert config.get("aptos.timeout") == 2.5

def test_file_overrides_environment(config_file):
    """Test that a config file wins over environment variables"""
    os.environ["CONNECTS_SUREPASS_TOKEN"] = "env-token"
    config = Config(config_file)
    assert config.get("surepass.token") == "sp-token"

def test_config_validation():
    """Test configuration validation rules"""
    with pytest.raises(ConfigError):
        Config().validate({"surepass": {"timeout": 0}})

    with pytest.raises(ConfigError):
        Config().validate({"openexchange": {"timeout": "fast"}})

    with pytest.raises(ConfigError):
        Config().validate({"surepass": {"mode": "STAGING"}})

    with pytest.raises(ConfigError):
        Config().validate({"aptos": {"network": "LOCALNET"}})

    Config().validate({"surepass": {"mode": "production"}, "aptos": {"network": "devnet"}})

def test_invalid_values_in_file(tmp_path):
    """Test that a file with invalid values is rejected on load"""
    config_path = tmp_path / "bad.json"
    config_path.write_text(json.dumps({"aptos": {"network": "NOWHERE"}}))
    with pytest.raises(ConfigError):
        Config(config_path)

def test_config_defaults():
    """Test default configuration values"""
    config = Config()
    assert config.get("app.debug") == False
    assert config.get("logging.level") == "INFO"
    assert config.get("surepass.mode") == "SANDBOX"
    assert config.get("openexchange.base_currency") == "USD"
    assert config.get("nonexistent.key", default="default") == "default"

def test_config_update():
    """Test configuration updates"""
    config = Config()
    config.update({
        "surepass": {
            "token": "new-token"
        }
    })
    assert config.get("surepass.token") == "new-token"
    assert config.get("surepass.mode") == "SANDBOX"

def test_nested_config_access():
    """Test accessing nested configuration values"""
    config = Config()
    config.set("deep.nested.value", 42)
    assert config.get("deep.nested.value") == 42

    config.update({"another": {"nested": {"key": "value"}}})
    assert config.get("another.nested.key") == "value"

def test_section_is_a_copy():
    """Test that sections cannot mutate the config"""
    config = Config()
    section = config.section("aptos")
    section["network"] = "DEVNET"
    assert config.get("aptos.network") == "MAINNET"
    assert config.section("missing") == {}

def test_config_type_conversion():
    """Test configuration value type conversion"""
    os.environ["CONNECTS_APP_DEBUG"] = "true"
    os.environ["CONNECTS_LOGGING_BACKUP_COUNT"] = "7"
    os.environ["CONNECTS_SUREPASS_TIMEOUT"] = "3.5"

    config = Config()
    assert config.get("app.debug") is True
    assert isinstance(config.get("logging.backup_count"), int)
    assert isinstance(config.get("surepass.timeout"), float)

def test_invalid_config_file(tmp_path):
    """Test handling of invalid configuration files"""
    with pytest.raises(ConfigError):
        Config(Path("nonexistent_config.json"))

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with pytest.raises(ConfigError):
        Config(broken)

    listing = tmp_path / "list.yaml"
    listing.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        Config(listing)

def test_config_serialization(sample_config, tmp_path):
    """Test configuration serialization and deserialization"""
    config = Config()
    config.update(sample_config)

    for name in ("saved_config.json", "saved_config.yml"):
        save_path = tmp_path / name
        config.save(save_path)

        loaded_config = Config(save_path)
        assert loaded_config.get("app.name") == config.get("app.name")
        assert loaded_config.get("surepass.mode") == "PRODUCTION"
