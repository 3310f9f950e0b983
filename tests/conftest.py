"""Pytest configuration and fixtures for messagearray tests."""

import io

import pytest

from messagearray import CatalogSite, MessageStore, reset_default_store


CATALOG = {
    "en": {
        "no-new-file-handle": {
            "text": "Cannot open *new* file handle",
            "html": "Cannot open <em>new</em> file handle",
        },
        "no-permission": {
            "text": "Do not have permission",
        },
        "greeting": {
            "text": "Hello [: sub param=name :] & welcome",
        },
    },
    "es": {
        "no-new-file-handle": {
            "text": "No se puede abrir el archivo de *nuevo* mango",
            "html": "No se puede abrir el archivo de <em>nuevo</em> mango",
        },
        "no-permission": {
            "text": "No tiene permiso",
        },
    },
}


class TaggingSite(CatalogSite):
    """Catalog site that also expands custom tags."""

    def __init__(self, catalog=None, lang="en"):
        super().__init__(catalog or CATALOG, lang)
        self.calls = []

    def process_message_tag(self, message, tag, mode):
        self.calls.append((message, tag, mode))
        return f"<{tag.name}|{tag.atts.get('x')}|{mode.value}>"


@pytest.fixture(autouse=True)
def fresh_default_store():
    """Every test starts with an empty default store."""
    yield reset_default_store()
    reset_default_store()


@pytest.fixture
def stream():
    """In-memory output sink."""
    return io.StringIO()


@pytest.fixture
def store(stream):
    """Empty store writing to an in-memory stream."""
    return MessageStore(stream=stream)


@pytest.fixture
def catalog_site():
    """English catalog site."""
    return CatalogSite(CATALOG, "en")


@pytest.fixture
def tagging_site():
    """Catalog site with custom tag support."""
    return TaggingSite()


@pytest.fixture
def errors_document():
    """Message document with two errors, one per property style."""
    return """<messages>
	<message list="errors">
		<property key="text" value="Error in attribute"/>
	</message>

	<message list="errors">
		<property key="text">Error in contents</property>
	</message>
</messages>
"""
