"""
Translation provider implementations.
"""

from .base import TranslationProvider, ProviderFactory
from .dsn import Dsn
from .http import ApiResponse, ScopedHttpClient
from .tolgee import TolgeeTranslationProvider, RemoteTranslation
from .factory import TolgeeProviderFactory, get_translation_provider

__all__ = [
    "TranslationProvider",
    "ProviderFactory",
    "Dsn",
    "ApiResponse",
    "ScopedHttpClient",
    "TolgeeTranslationProvider",
    "RemoteTranslation",
    "TolgeeProviderFactory",
    "get_translation_provider",
]
