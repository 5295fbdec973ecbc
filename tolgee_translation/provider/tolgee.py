"""
Tolgee translation provider implementation.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence
import time
from tolgee_translation.catalogue import ArrayLoader, FileDumper, TranslatorBag
from tolgee_translation.exceptions import ProviderError, RemoteKeyNotFoundError
from tolgee_translation.provider.base import TranslationProvider
from tolgee_translation.provider.http import ApiResponse, ScopedHttpClient


@dataclass
class RemoteTranslation:
    """Translation cell as stored by Tolgee."""
    id: int
    text: Optional[str]


# namespace -> locale -> key -> translation
RemoteTranslations = Dict[str, Dict[str, Dict[str, RemoteTranslation]]]


class TolgeeTranslationProvider(TranslationProvider):
    """Synchronizes catalogues with a Tolgee project."""

    MAX_PAGE_SIZE = 2000

    def __init__(
        self,
        client: ScopedHttpClient,
        loader: ArrayLoader,
        dumper: FileDumper,
        default_locale: str,
        endpoint: str,
        project_id: Optional[str] = None
    ):
        self.client = client
        self.loader = loader
        self.dumper = dumper
        self.default_locale = default_locale
        self.endpoint = endpoint
        self.project_id = project_id

    def __str__(self):
        return f"tolgee://{self.endpoint}"

    def log_context(self):
        return {"endpoint": self.endpoint, "project_id": self.project_id}

    async def write(self, translator_bag: TranslatorBag):
        """
        Upload every non-empty domain of every catalogue as a pending import.

        Raises:
            ProviderError: If Tolgee answers one of the import requests with a 5xx status
        """
        start_time = time.time()
        imports: Dict[str, Dict[str, str]] = {}

        for catalogue in translator_bag.get_catalogues():
            for domain in catalogue.get_domains():
                if not catalogue.all(domain):
                    continue

                content = self.dumper.format_catalogue(
                    catalogue,
                    domain,
                    default_locale=self.default_locale,
                )
                imports.setdefault(domain, {})[catalogue.locale] = content

        await self._delete_previous_imports()
        responses = await self._import_translations(imports)

        for response in responses:
            self._check_response(response, "Unable to import translations to Tolgee.")

        self.log_latency("tolgee_write", start_time, namespaces=len(imports), requests=len(responses))

    async def read(self, domains: Sequence[str], locales: Sequence[str]) -> TranslatorBag:
        """
        Fetch every translation of the project.

        The requested domains and locales are not used to filter the listing;
        callers pick what they need out of the returned bag.
        """
        translations = await self._get_translations()
        translator_bag = TranslatorBag()

        for namespace, namespace_locales in translations.items():
            for locale, keys in namespace_locales.items():
                messages = {
                    key: translation.text
                    for key, translation in keys.items()
                    if translation.text is not None
                }
                translator_bag.add_catalogue(
                    self.loader.load(messages, locale=locale, domain=namespace)
                )

        return translator_bag

    async def delete(self, translator_bag: TranslatorBag):
        """
        Delete the given keys from Tolgee.

        Raises:
            RemoteKeyNotFoundError: If a key is unknown to Tolgee; nothing is deleted then
            ProviderError: If Tolgee answers with a 5xx status
        """
        translations = await self._get_translations()
        ids_to_delete: List[int] = []

        for catalogue in translator_bag.get_catalogues():
            for domain, messages in catalogue.all().items():
                for key in messages:
                    try:
                        ids_to_delete.append(translations[domain][catalogue.locale][key].id)
                    except KeyError:
                        raise RemoteKeyNotFoundError(domain, catalogue.locale, key) from None

        if not ids_to_delete:
            self.logger.info("tolgee_delete_skipped", reason="no keys to delete")
            return

        response = await self.client.request("DELETE", "keys", json=ids_to_delete)
        self._check_response(response, "Unable to delete translation keys from Tolgee.")

    def _check_response(self, response: ApiResponse, message: str):
        """Log failed responses; server failures are fatal."""
        if response.status == 200:
            return

        self.logger.error(
            message,
            status_code=response.status,
            method=response.method,
            url=response.url,
            response_body=response.body,
        )

        if response.status >= 500:
            raise ProviderError(message, response)

    async def _delete_previous_imports(self):
        """Drop the pending import, a missing one is not an error."""
        response = await self.client.request("DELETE", "import")
        if response.status == 404:
            return
        response.raise_for_status()

    async def _import_translations(self, imports: Dict[str, Dict[str, str]]) -> List[ApiResponse]:
        """
        Upload one multi-part import per namespace.

        Files Tolgee leaves without namespace are assigned to the uploaded
        namespace with a follow-up request.

        Returns:
            Every response received, in request order
        """
        responses: List[ApiResponse] = []

        for namespace, contents in imports.items():
            files = [
                ("files", f"{locale}.json", content.encode("utf-8"), "application/json")
                for locale, content in contents.items()
            ]

            response = await self.client.request("POST", "import", files=files)
            responses.append(response)

            if response.status != 200:
                continue

            result = (response.json() or {}).get("result") or {}
            languages = result.get("_embedded", {}).get("languages", [])
            if not languages:
                self.logger.warning("tolgee_import_empty", namespace=namespace)

            for language in languages:
                if language["namespace"] is not None:
                    continue

                responses.append(await self.client.request(
                    "PUT",
                    f"import/result/files/{language['importFileId']}/select-namespace",
                    json={"namespace": namespace},
                ))

        return responses

    async def _get_translations(self) -> RemoteTranslations:
        """
        Walk the cursor-paginated translation listing.

        Raises:
            HttpStatusError: If a page cannot be fetched
        """
        translations: RemoteTranslations = {}
        cursor: Optional[str] = None

        while True:
            response = await self.client.request(
                "GET",
                "translations",
                params={"size": self.MAX_PAGE_SIZE, "cursor": cursor},
            )
            response.raise_for_status()
            content = response.json() or {}

            if "_embedded" not in content:
                return translations

            for key in content["_embedded"]["keys"]:
                namespace = key.get("keyNamespace") or ""
                for locale, translation in key["translations"].items():
                    locale_keys = translations.setdefault(namespace, {}).setdefault(locale, {})
                    locale_keys[key["keyName"]] = RemoteTranslation(
                        id=translation["id"],
                        text=translation.get("text"),
                    )

            cursor = content.get("nextCursor")
            if cursor is None:
                return translations

    async def _close(self):
        await self.client.close()
