"""
Exceptions raised by the Tolgee translation provider.

Transport failures (``aiohttp.ClientError``) are not wrapped and reach the
caller unchanged.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from tolgee_translation.provider.http import ApiResponse


class TranslationProviderError(Exception):
    """Base exception for translation provider errors"""
    pass


class ProviderError(TranslationProviderError):
    """Raised when the remote service fails fatally while writing or deleting"""

    def __init__(self, message: str, response: Optional["ApiResponse"] = None):
        super().__init__(message)
        self.response = response


class HttpStatusError(TranslationProviderError):
    """Raised for a response whose status code cannot be accepted"""

    def __init__(self, response: "ApiResponse"):
        super().__init__(
            f'HTTP {response.status} returned for "{response.method} {response.url}".'
        )
        self.response = response

    @property
    def status(self) -> int:
        return self.response.status


class RemoteKeyNotFoundError(TranslationProviderError):
    """Raised when a local key has no counterpart in the remote project"""

    def __init__(self, domain: str, locale: str, key: str):
        super().__init__(
            f'Key "{key}" of domain "{domain}" for locale "{locale}" does not exist in Tolgee.'
        )
        self.domain = domain
        self.locale = locale
        self.key = key


class InvalidDsnError(TranslationProviderError):
    """Raised when a connection descriptor cannot be parsed"""
    pass


class IncompleteDsnError(InvalidDsnError):
    """Raised when a connection descriptor lacks a required part"""
    pass


class UnsupportedSchemeError(TranslationProviderError):
    """Raised when a factory is asked to handle a scheme it does not support"""

    def __init__(self, scheme: str, supported):
        super().__init__(
            f'The "{scheme}" scheme is not supported; supported schemes are: "{", ".join(supported)}".'
        )
        self.scheme = scheme
