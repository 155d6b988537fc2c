"""Common ground for the settings groups."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvSettings(BaseSettings):
    """Settings group read from the process environment and ``.env``.

    Variable names match field names exactly; unrelated variables are ignored.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


def split_csv(value: str | None) -> list[str]:
    """Comma-separated value to a list of trimmed, non-empty entries.

    Examples:
        split_csv(" lt, en ,,ru ")
        Output: ["lt", "en", "ru"]
    """
    return [item.strip() for item in (value or "").split(",") if item.strip()]
