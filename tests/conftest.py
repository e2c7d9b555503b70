"""
Shared test configuration and fixtures
"""
import json
import pytest
from unittest.mock import Mock
from fastapi import FastAPI


SPEC_DOCUMENT = {
    "openapi": "3.1.0",
    "info": {"title": "Pets", "version": "1.0.0"},
    "paths": {"/pets": {"get": {"summary": "List pets"}}},
}


def extract_configuration(html: str) -> dict:
    """Decode the data-configuration attribute of the rendered page"""
    encoded = html.split('data-configuration="', 1)[1].split('"', 1)[0]
    return json.loads(encoded.replace("&quot;", '"'))


def extract_spec_content(html: str) -> str:
    """Body of the #api-reference script element"""
    after_attribute = html.split('data-configuration="', 1)[1].split('">', 1)[1]
    return after_attribute.split("</script>", 1)[0]


@pytest.fixture
def spec_document():
    return dict(SPEC_DOCUMENT)


@pytest.fixture
def spec_provider(spec_document):
    """A collaborator that always returns the same OpenAPI document"""
    provider = Mock()
    provider.get_spec.return_value = spec_document
    return provider


@pytest.fixture
def bare_app():
    """An app that doesn't publish an OpenAPI document"""
    return FastAPI(openapi_url=None)


@pytest.fixture
def app():
    """An app with OpenAPI generation but without the built-in docs pages"""
    app = FastAPI(title="Pets", version="1.0.0", docs_url=None, redoc_url=None)

    @app.get("/pets")
    async def list_pets():
        return []

    return app

