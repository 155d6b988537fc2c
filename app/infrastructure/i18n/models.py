"""Value types shared by the i18n package: keys, catalogs and locale config."""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


def normalize_locale_code(code: Optional[str]) -> str:
    """Normalize a locale code for comparison ("  RU " -> "ru")."""
    return (code or "").strip().lower()


def _read_only(node: Any) -> Any:
    if isinstance(node, Mapping):
        return MappingProxyType({key: _read_only(value) for key, value in node.items()})
    if isinstance(node, list):
        return tuple(_read_only(value) for value in node)
    return node


@dataclass(frozen=True)
class TranslationKey:
    """A dotted message key split at its first dot.

    ``pages.about.title`` has namespace ``pages`` and message key
    ``about.title``; the namespace is the top-level section of a YAML file.
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        return f"{self.namespace}.{self.message_key}"

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Parse "namespace.key".

        Raises:
            ValueError: When either side of the first dot is empty.
        """
        namespace, _, message_key = key_string.partition(".")
        if not namespace or not message_key:
            raise ValueError(
                f"Translation key must be in format 'namespace.key': {key_string}"
            )
        return cls(namespace=namespace, message_key=message_key)


@dataclass
class TranslationCatalog:
    """Messages of one locale as nested dicts, ``{namespace: {key: value}}``.

    ``loaded_at`` is the ISO 8601 time the loader built the catalog.
    """

    locale: str
    messages: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def get_message(self, key: TranslationKey) -> Optional[str]:
        """Walk the dotted message key; None unless it ends on a scalar."""
        node: Any = self.messages.get(key.namespace, {})
        for part in key.message_key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return None if node is None or isinstance(node, Mapping) else str(node)

    def has_message(self, key: TranslationKey) -> bool:
        return self.get_message(key) is not None

    def get_namespace(self, namespace: str) -> Mapping[str, Any]:
        return self.messages.get(namespace, {})

    def merge(self, other: "TranslationCatalog") -> None:
        """Fold another catalog in, section by section; ``other`` wins on clashes."""
        if isinstance(self.messages, MappingProxyType):
            raise TypeError(f"Catalog for {self.locale} is read-only")
        for namespace, section in other.messages.items():
            self.messages.setdefault(namespace, {}).update(section)

    def flatten(self) -> Dict[str, str]:
        """Flat ``{"namespace.key": message}`` view, as served by the catalog API."""
        flat: Dict[str, str] = {}
        pending = list(self.messages.items())
        while pending:
            path, node = pending.pop(0)
            if isinstance(node, Mapping):
                pending[:0] = [(f"{path}.{key}", value) for key, value in node.items()]
            elif node is not None:
                flat[path] = str(node)
        return flat

    def frozen(self) -> "TranslationCatalog":
        """Copy whose messages are read-only at every level."""
        return replace(self, messages=_read_only(self.messages))


@dataclass(frozen=True)
class LocaleConfig:
    """Supported codes in configured order, the default, and the host it came from."""

    supported_locales: Tuple[str, ...]
    default_locale: str
    hostname: Optional[str] = None

    def is_supported(self, code: Optional[str]) -> bool:
        return normalize_locale_code(code) in self.supported_locales
