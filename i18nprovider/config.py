import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Locales
    default_locale: str = "en"
    supported_locales: list[str] = ["en", "fr", "de", "es"]
    locales_dir: str = "./locales"

    # App
    environment: str = "development"

    @property
    def debug_tooling_enabled(self) -> bool:
        """Key registration is only wired outside production builds."""
        return self.environment != "production"


settings = Settings()

_log = logging.getLogger(__name__)
if settings.default_locale not in settings.supported_locales:
    _log.warning(
        "DEFAULT_LOCALE %r is not listed in SUPPORTED_LOCALES %s",
        settings.default_locale,
        settings.supported_locales,
    )
