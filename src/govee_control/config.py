"""Configuration loading for govee-control."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from govee_control.utils.errors import ConfigurationError

GOVEE_API_BASE = "https://openapi.api.govee.com/router/api/v1"
DEFAULT_BASE_COLOR = "FFFFFF"

# Environment variable reported for each required setting
_REQUIRED_ENV = {
    "api_key": "GOVEE_API_KEY",
    "device_id": "GOVEE_DEVICE_ID",
    "device_model": "GOVEE_DEVICE_MODEL",
}


class DeviceAddress(BaseModel):
    """The (sku, device) pair identifying the target light."""

    model_config = ConfigDict(frozen=True)

    sku: str
    device: str

    def to_payload(self) -> dict[str, str]:
        return {"sku": self.sku, "device": self.device}


class GoveeSettings(BaseSettings):
    """Settings read from the environment and an optional .env file."""

    model_config = SettingsConfigDict(env_prefix="GOVEE_", env_file=".env", extra="ignore")

    api_key: str = ""
    device_id: str = ""
    device_model: str = ""
    base_color: str = Field(
        default=DEFAULT_BASE_COLOR,
        validation_alias=AliasChoices("BASE_COLOR", "GOVEE_BASE_COLOR", "base_color"),
    )
    api_base: str = GOVEE_API_BASE
    timeout: float = 10.0

    @field_validator("base_color", mode="before")
    @classmethod
    def _default_empty_base_color(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_BASE_COLOR
        return value

    @property
    def address(self) -> DeviceAddress:
        return DeviceAddress(sku=self.device_model, device=self.device_id)

    def validate_required(self) -> None:
        """Ensure the API key and device identity are present.

        Raises:
            ConfigurationError: Naming the first missing environment variable
        """
        for attr, env_name in _REQUIRED_ENV.items():
            if not getattr(self, attr):
                raise ConfigurationError(f"{env_name} environment variable is required.")


def config_dir_candidates() -> list[Path]:
    """Directories searched for config.yaml, most specific first."""
    cwd = Path.cwd()
    return [
        cwd / "config",
        cwd.parent / "config",
        Path.home() / ".config" / "govee-control",
    ]


def find_config_dir() -> Path:
    """Return the first existing candidate directory, or ./config if none exists."""
    candidates = config_dir_candidates()
    return next((path for path in candidates if path.is_dir()), candidates[0])


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        return {}
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping")
    return data


def load_settings(config_dir: Path | str | None = None, validate: bool = True) -> GoveeSettings:
    """Load settings from config.yaml, the .env file and the environment.

    Environment variables take precedence over values in config.yaml.
    """
    if config_dir is None:
        config_dir = find_config_dir()

    file_values = load_yaml(Path(config_dir) / "config.yaml")

    try:
        settings = GoveeSettings(**file_values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    # Init kwargs outrank the environment in pydantic-settings, so re-read
    # the environment on its own and let it win.
    if file_values:
        env_settings = GoveeSettings()
        overrides = {
            name: getattr(env_settings, name)
            for name in env_settings.model_fields_set
        }
        settings = settings.model_copy(update=overrides)

    if validate:
        settings.validate_required()
    return settings
