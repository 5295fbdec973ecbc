"""
Shared fixtures: a recording stand-in for the scoped Tolgee client.
"""

import json
from unittest.mock import Mock
import pytest

from tolgee_translation.catalogue import ArrayLoader, JsonFileDumper, MessageCatalogue, TranslatorBag
from tolgee_translation.provider.http import ApiResponse
from tolgee_translation.provider.tolgee import TolgeeTranslationProvider


class FakeScopedClient:
    """Answers requests from a per-route queue and records every call."""

    def __init__(self):
        self.calls = []
        self.routes = {}
        self.errors = {}
        self.closed = False

    def respond(self, method, path, status=200, body=None):
        text = body if isinstance(body, str) or body is None else json.dumps(body)
        self.routes.setdefault((method, path), []).append((status, text or ""))

    def fail(self, method, path, error):
        self.errors[(method, path)] = error

    def calls_to(self, method, path=None):
        return [c for c in self.calls if c["method"] == method and (path is None or c["path"] == path)]

    async def request(self, method, path, params=None, json=None, files=None):
        self.calls.append({"method": method, "path": path, "params": params, "json": json, "files": files})
        if (method, path) in self.errors:
            raise self.errors[(method, path)]
        queue = self.routes.get((method, path))
        if not queue:
            status, body = 200, ""
        elif len(queue) > 1:
            status, body = queue.pop(0)
        else:
            status, body = queue[0]
        return ApiResponse(method=method, url=f"https://tolgee.test/v2/projects/1/{path}", status=status, body=body)

    async def close(self):
        self.closed = True


def translations_page(keys, next_cursor=None):
    """Build a GET /translations page out of (namespace, name, {locale: (id, text)}) tuples."""
    return {
        "_embedded": {
            "keys": [
                {
                    "keyNamespace": namespace,
                    "keyName": name,
                    "translations": {
                        locale: {"id": id_, "text": text} for locale, (id_, text) in cells.items()
                    },
                }
                for namespace, name, cells in keys
            ]
        },
        "nextCursor": next_cursor,
    }


def import_result(*languages):
    """Build a POST /import response out of (import file id, namespace) pairs."""
    return {
        "result": {
            "_embedded": {
                "languages": [
                    {"importFileId": file_id, "namespace": namespace} for file_id, namespace in languages
                ]
            }
        }
    }


def make_bag(messages):
    """Build a bag out of {locale: {domain: {key: text}}}."""
    bag = TranslatorBag()
    for locale, domains in messages.items():
        bag.add_catalogue(MessageCatalogue(locale, domains))
    return bag


@pytest.fixture
def client():
    return FakeScopedClient()


@pytest.fixture
def provider(client):
    provider = TolgeeTranslationProvider(
        client=client,
        loader=ArrayLoader(),
        dumper=JsonFileDumper(),
        default_locale="en",
        endpoint="app.tolgee.io",
    )
    provider._logger = Mock()
    return provider
