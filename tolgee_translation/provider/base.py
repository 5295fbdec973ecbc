"""
Base interfaces for translation providers and their factories.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence
from tolgee_translation.catalogue import TranslatorBag
from tolgee_translation.exceptions import UnsupportedSchemeError
from tolgee_translation.provider.dsn import Dsn
from tolgee_translation.utils.logging import LoggerMixin


class TranslationProvider(ABC, LoggerMixin):
    """Abstract base class for remote translation providers."""

    @abstractmethod
    async def write(self, translator_bag: TranslatorBag):
        """
        Push local translations to the remote service.

        Args:
            translator_bag: Catalogues to push
        """
        pass

    @abstractmethod
    async def read(self, domains: Sequence[str], locales: Sequence[str]) -> TranslatorBag:
        """
        Pull translations from the remote service.

        Args:
            domains: Requested domains
            locales: Requested locales

        Returns:
            TranslatorBag with the remote translations
        """
        pass

    @abstractmethod
    async def delete(self, translator_bag: TranslatorBag):
        """
        Remove the keys present in the given catalogues from the remote service.

        Args:
            translator_bag: Catalogues listing the keys to remove
        """
        pass

    async def close(self):
        """Clean up resources."""
        await self._close()
        self.logger.info(f"{self.__class__.__name__} closed")

    async def _close(self):
        """Provider-specific cleanup logic."""
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()


class ProviderFactory(ABC):
    """Builds providers out of connection descriptors."""

    @property
    @abstractmethod
    def supported_schemes(self) -> List[str]:
        pass

    def supports(self, dsn: Dsn) -> bool:
        return dsn.scheme in self.supported_schemes

    def create(self, dsn: Dsn) -> TranslationProvider:
        """
        Create a provider for a descriptor.

        Raises:
            UnsupportedSchemeError: If the descriptor scheme is not handled here
        """
        if not self.supports(dsn):
            raise UnsupportedSchemeError(dsn.scheme, self.supported_schemes)
        return self._create(dsn)

    @abstractmethod
    def _create(self, dsn: Dsn) -> TranslationProvider:
        """Provider-specific construction logic."""
        pass
