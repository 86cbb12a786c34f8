"""Tests for configuration loading."""

from pathlib import Path

import pytest

from govee_control.config import (
    DEFAULT_BASE_COLOR,
    DeviceAddress,
    GoveeSettings,
    find_config_dir,
    load_settings,
    load_yaml,
)
from govee_control.utils.errors import ConfigurationError


def set_required_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOVEE_API_KEY", "env-key")
    monkeypatch.setenv("GOVEE_DEVICE_ID", "AA:BB")
    monkeypatch.setenv("GOVEE_DEVICE_MODEL", "H6008")


class TestLoadSettings:
    """Tests for load_settings."""

    def test_from_environment(self, clean_env, monkeypatch):
        """Test settings come from GOVEE_* environment variables."""
        set_required_env(monkeypatch)

        settings = load_settings(clean_env)

        assert settings.api_key == "env-key"
        assert settings.address == DeviceAddress(sku="H6008", device="AA:BB")
        assert settings.base_color == DEFAULT_BASE_COLOR

    def test_base_color_env(self, clean_env, monkeypatch):
        """Test BASE_COLOR is read without the GOVEE_ prefix."""
        set_required_env(monkeypatch)
        monkeypatch.setenv("BASE_COLOR", "#FF00FF")

        assert load_settings(clean_env).base_color == "#FF00FF"

    def test_empty_base_color_defaults(self, clean_env, monkeypatch):
        """Test an empty BASE_COLOR falls back to white."""
        set_required_env(monkeypatch)
        monkeypatch.setenv("BASE_COLOR", "")

        assert load_settings(clean_env).base_color == "FFFFFF"

    @pytest.mark.parametrize("missing", ["GOVEE_API_KEY", "GOVEE_DEVICE_ID", "GOVEE_DEVICE_MODEL"])
    def test_missing_required(self, clean_env, monkeypatch, missing):
        """Test each required variable is reported when absent."""
        set_required_env(monkeypatch)
        monkeypatch.delenv(missing)

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(clean_env)
        assert missing in str(exc_info.value)

    def test_skip_validation(self, clean_env):
        """Test validation can be skipped."""
        settings = load_settings(clean_env, validate=False)
        assert settings.api_key == ""

    def test_dotenv_file(self, clean_env):
        """Test values are read from a .env file in the working directory."""
        (clean_env / ".env").write_text(
            "GOVEE_API_KEY=dotenv-key\nGOVEE_DEVICE_ID=CC:DD\nGOVEE_DEVICE_MODEL=H6199\n"
        )

        settings = load_settings(clean_env)

        assert settings.api_key == "dotenv-key"
        assert settings.address.sku == "H6199"

    def test_yaml_file(self, clean_env):
        """Test values are read from config.yaml."""
        (clean_env / "config.yaml").write_text(
            "api_key: yaml-key\ndevice_id: EE:FF\ndevice_model: H6008\nbase_color: '00FF00'\n"
        )

        settings = load_settings(clean_env)

        assert settings.api_key == "yaml-key"
        assert settings.base_color == "00FF00"

    def test_environment_overrides_yaml(self, clean_env, monkeypatch):
        """Test environment variables win over config.yaml."""
        (clean_env / "config.yaml").write_text("api_key: yaml-key\ndevice_id: EE:FF\ndevice_model: H6008\n")
        monkeypatch.setenv("GOVEE_API_KEY", "env-key")

        settings = load_settings(clean_env)

        assert settings.api_key == "env-key"
        assert settings.device_id == "EE:FF"

    def test_invalid_yaml(self, clean_env):
        """Test a broken config.yaml is a configuration error."""
        (clean_env / "config.yaml").write_text("api_key: [unclosed\n")

        with pytest.raises(ConfigurationError):
            load_settings(clean_env)


class TestLoadYaml:
    """Tests for load_yaml."""

    def test_missing_file(self, tmp_path):
        """Test a missing file yields an empty dict."""
        assert load_yaml(tmp_path / "nope.yaml") == {}

    def test_not_a_mapping(self, tmp_path):
        """Test a YAML list is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("- one\n- two\n")
        with pytest.raises(ConfigurationError):
            load_yaml(path)


class TestFindConfigDir:
    """Tests for find_config_dir."""

    @pytest.fixture
    def workdir(self, tmp_path, monkeypatch):
        work = tmp_path / "project" / "work"
        work.mkdir(parents=True)
        monkeypatch.chdir(work)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path / "home"))
        return work

    def test_prefers_local_config(self, workdir, tmp_path):
        """Test ./config wins over the parent and home directories."""
        (workdir / "config").mkdir()
        (tmp_path / "project" / "config").mkdir()
        (tmp_path / "home" / ".config" / "govee-control").mkdir(parents=True)

        assert find_config_dir() == workdir / "config"

    def test_parent_config(self, workdir, tmp_path):
        """Test ../config is used when ./config is absent."""
        (tmp_path / "project" / "config").mkdir()

        assert find_config_dir() == tmp_path / "project" / "config"

    def test_home_config(self, workdir, tmp_path):
        """Test ~/.config/govee-control is the last place searched."""
        home_config = tmp_path / "home" / ".config" / "govee-control"
        home_config.mkdir(parents=True)

        assert find_config_dir() == home_config

    def test_defaults_to_local_config(self, workdir):
        """Test ./config is returned when no candidate exists."""
        assert find_config_dir() == workdir / "config"


def test_device_address_is_frozen():
    """Test the device address cannot change after creation."""
    address = DeviceAddress(sku="H6008", device="AA")
    with pytest.raises(Exception):
        address.sku = "other"


def test_settings_timeout(clean_env, monkeypatch):
    """Test GOVEE_TIMEOUT is parsed as a float."""
    monkeypatch.setenv("GOVEE_TIMEOUT", "2.5")
    assert GoveeSettings().timeout == 2.5
