"""Root settings for the message engine."""

from pydantic import Field

from i18n_datastore.configuration.base import ComponentSettings
from i18n_datastore.configuration.i18n import I18nSettings


class Settings(ComponentSettings):
    """Engine-wide settings with the message settings nested under ``i18n``.

    Environment Variables:
        PREFIX: Deployment prefix; empty in production
        LOG_LEVEL: Level for engine logs (DEBUG, INFO, WARNING, ERROR)

    Example:
        from i18n_datastore.configuration import settings

        root = settings.i18n.source_root
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings = Field(default_factory=I18nSettings)

    @property
    def is_production(self) -> bool:
        """True when no deployment prefix is set."""
        return self.PREFIX == ""


settings = Settings()
