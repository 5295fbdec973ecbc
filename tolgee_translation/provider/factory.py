"""
Factory for creating Tolgee provider instances.
"""

from typing import List, Optional, Union
from tolgee_translation.catalogue import ArrayLoader, FileDumper, JsonFileDumper
from tolgee_translation.config import settings
from tolgee_translation.provider.base import ProviderFactory
from tolgee_translation.provider.dsn import Dsn
from tolgee_translation.provider.http import ScopedHttpClient
from tolgee_translation.provider.tolgee import TolgeeTranslationProvider
from tolgee_translation.utils.logging import get_logger

logger = get_logger(__name__)


class TolgeeProviderFactory(ProviderFactory):
    """Creates providers bound to one Tolgee project."""

    def __init__(
        self,
        loader: Optional[ArrayLoader] = None,
        dumper: Optional[FileDumper] = None,
        default_locale: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        self.loader = loader or ArrayLoader()
        self.dumper = dumper or JsonFileDumper()
        self.default_locale = default_locale or settings.default_locale
        self.timeout = timeout if timeout is not None else settings.request_timeout

    @property
    def supported_schemes(self) -> List[str]:
        return ["tolgee"]

    def _create(self, dsn: Dsn) -> TolgeeTranslationProvider:
        endpoint = dsn.host
        if dsn.port:
            endpoint += f":{dsn.port}"

        project_id = dsn.get_user()
        client = ScopedHttpClient.for_base_uri(
            f"https://{endpoint}/v2/projects/{project_id}",
            headers={"X-API-Key": dsn.get_password()},
            timeout=self.timeout,
        )

        logger.info("tolgee_provider_created", endpoint=endpoint, project_id=project_id)

        return TolgeeTranslationProvider(
            client=client,
            loader=self.loader,
            dumper=self.dumper,
            default_locale=self.default_locale,
            endpoint=endpoint,
            project_id=project_id,
        )


def get_translation_provider(
    dsn: Optional[Union[str, Dsn]] = None,
    **kwargs
) -> TolgeeTranslationProvider:
    """
    Factory function to get a Tolgee provider instance.

    Args:
        dsn: Connection descriptor, defaults to the configured TOLGEE_DSN
        **kwargs: Additional configuration for the factory

    Returns:
        TolgeeTranslationProvider instance

    Raises:
        ValueError: If no descriptor is given or configured
    """
    dsn = dsn or settings.tolgee_dsn
    if not dsn:
        raise ValueError("No Tolgee DSN given and TOLGEE_DSN is not configured")

    if isinstance(dsn, str):
        dsn = Dsn.from_string(dsn)

    logger.info(f"Creating translation provider: {dsn}")
    return TolgeeProviderFactory(**kwargs).create(dsn)
