"""
Translation catalogues and their loaders and dumpers.
"""

from .message_catalogue import MessageCatalogue, TranslatorBag, DEFAULT_DOMAIN
from .loader import ArrayLoader
from .dumper import FileDumper, JsonFileDumper

__all__ = [
    "MessageCatalogue",
    "TranslatorBag",
    "DEFAULT_DOMAIN",
    "ArrayLoader",
    "FileDumper",
    "JsonFileDumper",
]
