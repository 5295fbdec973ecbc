"""
Dumpers turning a catalogue domain into file content.
"""

from abc import ABC, abstractmethod
import json
from tolgee_translation.catalogue.message_catalogue import MessageCatalogue


class FileDumper(ABC):
    """Abstract base class for catalogue file formats."""

    extension: str = ""

    @abstractmethod
    def format_catalogue(self, catalogue: MessageCatalogue, domain: str, **options) -> str:
        """
        Render the messages of one domain.

        Args:
            catalogue: Catalogue to render
            domain: Domain whose messages are rendered
            **options: Format specific options (e.g. ``default_locale``)

        Returns:
            File content
        """
        pass


class JsonFileDumper(FileDumper):
    """Renders a domain as a flat JSON object."""

    extension = "json"

    def format_catalogue(self, catalogue: MessageCatalogue, domain: str, **options) -> str:
        # default_locale is only meaningful for bilingual formats
        indent = options.get("indent", 4)
        return json.dumps(catalogue.all(domain), ensure_ascii=False, indent=indent)
