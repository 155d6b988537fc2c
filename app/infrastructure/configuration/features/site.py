"""Public site feature settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import EnvSettings


class SiteSettings(EnvSettings):
    """Marketing site configuration.

    Environment Variables:
        PROD_SITE: Production hostname without scheme (default: test.com)
        MODE: Build/runtime mode; "development" enables development behavior
        SITE_NAME: Brand name rendered in page titles

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        sitemap = f"{settings.site.canonical_origin}/sitemap-index.xml"
        ```
    """

    PROD_SITE: str = Field(default="test.com", alias="PROD_SITE")
    MODE: str = Field(default="production", alias="MODE")
    SITE_NAME: str = Field(default="Jaukuma", alias="SITE_NAME")

    @field_validator("PROD_SITE", mode="before")
    @classmethod
    def _strip_scheme(cls, v: str | None) -> str:
        """Accept hostnames given with a scheme or trailing slash."""
        if not v:
            return "test.com"
        host = str(v).strip().lower()
        for scheme in ("https://", "http://"):
            if host.startswith(scheme):
                host = host[len(scheme) :]
        return host.split("/")[0] or "test.com"

    @property
    def is_development(self) -> bool:
        """Check if the site runs in development mode."""
        return self.MODE.strip().lower() == "development"

    @property
    def canonical_host(self) -> str:
        """Public host, always on the www. subdomain."""
        if self.PROD_SITE.startswith("www."):
            return self.PROD_SITE
        return f"www.{self.PROD_SITE}"

    @property
    def canonical_origin(self) -> str:
        """Public origin used for absolute URLs (sitemaps, robots.txt)."""
        return f"https://{self.canonical_host}"
