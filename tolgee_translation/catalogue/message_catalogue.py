"""
In-memory translation catalogues.
"""

from typing import Dict, List, Optional


DEFAULT_DOMAIN = "messages"


class MessageCatalogue:
    """Translations of a single locale, grouped by domain."""

    def __init__(self, locale: str, messages: Optional[Dict[str, Dict[str, str]]] = None):
        self.locale = locale
        self._messages: Dict[str, Dict[str, str]] = {}
        for domain, domain_messages in (messages or {}).items():
            self.add(domain_messages, domain)

    def __repr__(self):
        return f"MessageCatalogue(locale={self.locale!r}, domains={self.get_domains()!r})"

    def get_domains(self) -> List[str]:
        return list(self._messages)

    def all(self, domain: Optional[str] = None):
        """
        Get messages of one domain, or every domain when none is given.

        Args:
            domain: Domain name

        Returns:
            ``{key: text}`` for a domain, ``{domain: {key: text}}`` otherwise
        """
        if domain is not None:
            return dict(self._messages.get(domain, {}))
        return {name: dict(messages) for name, messages in self._messages.items()}

    def set(self, key: str, text: str, domain: str = DEFAULT_DOMAIN):
        self.add({key: text}, domain)

    def has(self, key: str, domain: str = DEFAULT_DOMAIN) -> bool:
        return key in self._messages.get(domain, {})

    def get(self, key: str, domain: str = DEFAULT_DOMAIN) -> str:
        """Get a message, falling back to the key itself when it is missing."""
        return self._messages.get(domain, {}).get(key, key)

    def add(self, messages: Dict[str, str], domain: str = DEFAULT_DOMAIN):
        """Add messages to a domain; the domain is created even when empty."""
        self._messages.setdefault(domain, {}).update(messages)

    def replace(self, messages: Dict[str, str], domain: str = DEFAULT_DOMAIN):
        self._messages[domain] = {}
        self.add(messages, domain)

    def add_catalogue(self, catalogue: "MessageCatalogue"):
        """Merge another catalogue of the same locale into this one."""
        if catalogue.locale != self.locale:
            raise ValueError(
                f'Cannot add a catalogue for locale "{catalogue.locale}" '
                f'as the current locale for this catalogue is "{self.locale}".'
            )

        for domain, messages in catalogue.all().items():
            self.add(messages, domain)


class TranslatorBag:
    """A set of catalogues, at most one per locale."""

    def __init__(self):
        self._catalogues: Dict[str, MessageCatalogue] = {}

    def __len__(self):
        return len(self._catalogues)

    def add_catalogue(self, catalogue: MessageCatalogue):
        existing = self._catalogues.get(catalogue.locale)
        if existing is not None:
            existing.add_catalogue(catalogue)
        else:
            self._catalogues[catalogue.locale] = catalogue

    def add_bag(self, bag: "TranslatorBag"):
        for catalogue in bag.get_catalogues():
            self.add_catalogue(catalogue)

    def get_catalogue(self, locale: str) -> Optional[MessageCatalogue]:
        return self._catalogues.get(locale)

    def get_catalogues(self) -> List[MessageCatalogue]:
        return list(self._catalogues.values())

    def get_domains(self) -> List[str]:
        domains: List[str] = []
        for catalogue in self._catalogues.values():
            for domain in catalogue.get_domains():
                if domain not in domains:
                    domains.append(domain)
        return domains

    def all(self) -> Dict[str, Dict[str, Dict[str, str]]]:
        """Get every message as ``{locale: {domain: {key: text}}}``."""
        return {locale: catalogue.all() for locale, catalogue in self._catalogues.items()}

    def diff(self, diff_bag: "TranslatorBag") -> "TranslatorBag":
        """
        Get the messages of this bag that are absent from another one.

        Args:
            diff_bag: Bag to compare against

        Returns:
            New bag holding only the missing keys
        """
        return self._compare(diff_bag, keep_common=False)

    def intersect(self, intersect_bag: "TranslatorBag") -> "TranslatorBag":
        """Get the messages of this bag whose keys also exist in another one."""
        return self._compare(intersect_bag, keep_common=True)

    def _compare(self, other: "TranslatorBag", keep_common: bool) -> "TranslatorBag":
        result = TranslatorBag()

        for catalogue in self._catalogues.values():
            other_catalogue = other.get_catalogue(catalogue.locale)
            compared = MessageCatalogue(catalogue.locale)

            for domain, messages in catalogue.all().items():
                kept = {
                    key: text for key, text in messages.items()
                    if (other_catalogue is not None and other_catalogue.has(key, domain)) == keep_common
                }
                if kept:
                    compared.add(kept, domain)

            if compared.get_domains():
                result.add_catalogue(compared)

        return result
