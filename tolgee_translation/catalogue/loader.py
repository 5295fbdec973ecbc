"""
Loader building catalogues from plain mappings.
"""

from typing import Any, Dict, Mapping
from tolgee_translation.catalogue.message_catalogue import MessageCatalogue, DEFAULT_DOMAIN


class ArrayLoader:
    """Loads ``{key: text}`` mappings, nested mappings are flattened with dots."""

    def load(
        self,
        resource: Mapping[str, Any],
        locale: str,
        domain: str = DEFAULT_DOMAIN
    ) -> MessageCatalogue:
        catalogue = MessageCatalogue(locale)
        catalogue.add(self._flatten(resource), domain)
        return catalogue

    def _flatten(self, resource: Mapping[str, Any], prefix: str = "") -> Dict[str, Any]:
        flat: Dict[str, Any] = {}
        for key, value in resource.items():
            name = f"{prefix}{key}"
            if isinstance(value, Mapping):
                flat.update(self._flatten(value, f"{name}."))
            else:
                flat[name] = value
        return flat
