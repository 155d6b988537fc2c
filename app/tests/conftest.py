import sys
from pathlib import Path

# Make the application package root importable regardless of where pytest
# is invoked from (`infrastructure.services`-style absolute imports).
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.services import reset_providers  # noqa: E402

SITE_ENV_VARS = (
    "PREFIX",
    "LOG_LEVEL",
    "GIT_SHA",
    "LANGUAGES",
    "DEFAULT_LANG",
    "TRANSLATIONS_DIR",
    "PROD_SITE",
    "MODE",
    "SITE_NAME",
    "CANONICAL_REDIRECT_ENABLED",
    "APEX_DOMAIN",
    "ALLOWED_ORIGINS",
)


@pytest.fixture(autouse=True)
def clean_site_environment(monkeypatch):
    """Run every test against default settings and fresh providers."""
    for name in SITE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_providers()
    yield
    reset_providers()
