"""Process-wide settings, read from ``RECORD_URL_*`` environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from record_url_resolution.resolver.resolution_configuration import (
    DEFAULT_CONFIGURATION,
    LEGACY_DEVICE_CONFIGURATION,
    ResolutionConfiguration,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RECORD_URL_", frozen=True)

    verbose: bool = False
    log_json: bool = False
    # route new_servloc into the maintenance contract slot, as deployed workflows do
    legacy_device_slot: bool = False

    def build_configuration(self) -> ResolutionConfiguration:
        if self.legacy_device_slot:
            return LEGACY_DEVICE_CONFIGURATION
        return DEFAULT_CONFIGURATION
