"""Internationalization feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Translation catalog configuration.

    Environment Variables:
        I18N_LANG_PATH: Source root with one directory per locale
        I18N_OUTPUT_PATH: Directory for built <locale>.json catalogs
            (empty: same as I18N_LANG_PATH)
        I18N_DEFAULT_LOCALE: Locale loaded at startup
        I18N_FALLBACK_LOCALE: Locale used when a locale fails to load
        I18N_RESERVED_SEGMENTS: Top-level directories that are not locales
        I18N_STRICT_KEY_COLLISIONS: Fail a build on duplicate keys
        I18N_BUILD_MAX_WORKERS: Maximum parallel locale builds

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        lang_path = settings.i18n.LANG_PATH
        ```
    """

    LANG_PATH: str = Field(default="lang", alias="I18N_LANG_PATH")
    OUTPUT_PATH: str = Field(default="", alias="I18N_OUTPUT_PATH")
    DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    FALLBACK_LOCALE: str = Field(default="en", alias="I18N_FALLBACK_LOCALE")
    RESERVED_SEGMENTS: list[str] = Field(
        default=["vendor"], alias="I18N_RESERVED_SEGMENTS"
    )
    STRICT_KEY_COLLISIONS: bool = Field(
        default=False, alias="I18N_STRICT_KEY_COLLISIONS"
    )
    BUILD_MAX_WORKERS: int = Field(default=4, alias="I18N_BUILD_MAX_WORKERS")

    @property
    def catalog_path(self) -> str:
        """Directory holding built catalogs."""
        return self.OUTPUT_PATH or self.LANG_PATH
