"""Annotated aliases so routes can declare what they need by type.

Example:
    @router.get("/{path:path}")
    def page(path: str, resolver: LocaleResolverDep, translator: TranslatorDep):
        ...
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import LocaleRegistry, LocaleResolver, Translator
from infrastructure.services.providers import (
    get_locale_registry,
    get_locale_resolver,
    get_settings,
    get_translator,
)

SettingsDep = Annotated[Settings, Depends(get_settings)]
LocaleRegistryDep = Annotated[LocaleRegistry, Depends(get_locale_registry)]
LocaleResolverDep = Annotated[LocaleResolver, Depends(get_locale_resolver)]
TranslatorDep = Annotated[Translator, Depends(get_translator)]
