"""Reading translation catalogs from disk.

Translations live in ``app/locales`` as ``<domain>.<locale>.yml`` files, for
example ``site.lt.yml`` (navigation, footer, error page) and ``pages.lt.yml``
(page titles and bodies). All domains of one locale are merged into a single
catalog whose top-level YAML keys become namespaces.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List

import yaml

from infrastructure.i18n.models import TranslationCatalog, normalize_locale_code
from infrastructure.logging import get_module_logger

logger = get_module_logger()

FILE_SUFFIX = ".yml"


class TranslationLoader(ABC):
    """Source of translation catalogs, one per locale."""

    @abstractmethod
    def load(self, locale: str) -> TranslationCatalog:
        """Return the catalog for ``locale``.

        Raises:
            FileNotFoundError: Nothing exists for the locale.
            ValueError: A source exists but cannot be parsed.
        """

    @abstractmethod
    def available_locales(self) -> List[str]:
        """Locale codes this loader has sources for."""

    def load_all(self, locales: Iterable[str]) -> Dict[str, TranslationCatalog]:
        """Load several locales, leaving out the ones without sources."""
        catalogs: Dict[str, TranslationCatalog] = {}
        for locale in locales:
            try:
                catalogs[locale] = self.load(locale)
            except FileNotFoundError:
                logger.warning("locale_files_missing", locale=locale)
        return catalogs


def _read_document(path: Path) -> Any:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        logger.error("translation_file_unparseable", file=str(path), error=str(e))
        raise ValueError(f"Failed to parse {path}: {e}") from e


def _namespaces(document: Any, path: Path) -> Dict[str, Dict[str, Any]]:
    """Keep the mapping-valued top-level sections of a parsed file."""
    if document is None:
        return {}
    if not isinstance(document, dict):
        logger.warning("translation_file_not_mapping", file=str(path))
        return {}

    sections: Dict[str, Dict[str, Any]] = {}
    for name, section in document.items():
        if isinstance(section, dict):
            sections[str(name)] = section
        else:
            logger.warning("translation_section_skipped", file=str(path), namespace=name)
    return sections


class YAMLTranslationLoader(TranslationLoader):
    """Loads ``<domain>.<locale>.yml`` files from one directory.

    Files of a locale are merged in name order, so ``pages`` sorts before
    ``site`` and a key defined in both takes its value from ``site``.
    """

    def __init__(self, translations_dir: Path, use_cache: bool = True):
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, TranslationCatalog] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )
        logger.info(
            "translation_loader_ready",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def _files_for(self, locale: str) -> List[Path]:
        return sorted(self.translations_dir.glob(f"*.{locale}{FILE_SUFFIX}"))

    def load(self, locale: str) -> TranslationCatalog:
        code = normalize_locale_code(locale)
        cached = self.cache.get(code) if self.use_cache else None
        if cached is not None:
            return cached

        files = self._files_for(code) if code else []
        if not files:
            raise FileNotFoundError(
                f"No translation files found for locale {code} in {self.translations_dir}"
            )

        catalog = TranslationCatalog(
            locale=code, loaded_at=datetime.now(timezone.utc).isoformat()
        )
        for path in files:
            sections = _namespaces(_read_document(path), path)
            if sections:
                catalog.merge(TranslationCatalog(locale=code, messages=sections))

        logger.info(
            "locale_loaded",
            locale=code,
            files=[path.name for path in files],
            namespaces=sorted(catalog.messages),
        )
        if self.use_cache:
            self.cache[code] = catalog
        return catalog

    def available_locales(self) -> List[str]:
        """Locale codes taken from the last dotted part of each file stem."""
        codes = {
            path.stem.rsplit(".", 1)[-1].lower()
            for path in self.translations_dir.glob(f"*{FILE_SUFFIX}")
            if "." in path.stem
        }
        return sorted(code for code in codes if code)

    def clear_cache(self) -> None:
        self.cache.clear()
