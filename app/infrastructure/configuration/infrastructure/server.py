"""Server infrastructure settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import EnvSettings, split_csv


class ServerSettings(EnvSettings):
    """Server and request handling configuration.

    Environment Variables:
        CANONICAL_REDIRECT_ENABLED: Redirect the bare apex host to www. (default: True)
        APEX_DOMAIN: Apex host to redirect from (default: the PROD_SITE host)
        ALLOWED_ORIGINS: Comma-separated CORS origins for non-production runs

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        if settings.server.CANONICAL_REDIRECT_ENABLED:
            apex = settings.server.APEX_DOMAIN or settings.site.PROD_SITE
        ```
    """

    CANONICAL_REDIRECT_ENABLED: bool = Field(
        default=True, alias="CANONICAL_REDIRECT_ENABLED"
    )
    APEX_DOMAIN: str | None = Field(default=None, alias="APEX_DOMAIN")
    ALLOWED_ORIGINS: str = Field(
        default="http://localhost:8000,http://127.0.0.1:8000",
        alias="ALLOWED_ORIGINS",
    )

    @field_validator("APEX_DOMAIN", mode="before")
    @classmethod
    def _normalize_apex(cls, v: str | None) -> str | None:
        """Lower-case the apex domain and treat blanks as unset."""
        if v is None:
            return None
        v = str(v).strip().lower()
        return v or None

    @property
    def allowed_origins(self) -> list[str]:
        """CORS origins as a list."""
        return split_csv(self.ALLOWED_ORIGINS)
