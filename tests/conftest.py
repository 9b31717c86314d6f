"""Shared fixtures for the wsdoc test suite."""

from __future__ import annotations

from textwrap import dedent

import pytest

from wsdoc.directives import DirectiveDispatcher
from wsdoc.glossary import Glossary
from wsdoc.registry import TypeRegistry

PAYLOAD_MODULE = "ws_payloads"


@pytest.fixture
def glossary() -> Glossary:
    """Return a small glossary mixing upper- and lower-case terms."""
    return Glossary(
        {
            "ID": "item identifier",
            "N": "page size",
            "BID": "business unit identifier",
            "rid": "rentable identifier",
            "Address.city": "city of the rentable",
        }
    )


@pytest.fixture
def registry() -> TypeRegistry:
    """Return a registry of the dataclasses defined in ``ws_payloads``."""
    return TypeRegistry.from_modules([PAYLOAD_MODULE])


@pytest.fixture
def dispatcher(glossary: Glossary, registry: TypeRegistry) -> DirectiveDispatcher:
    """Return a dispatcher for ``#`` comments."""
    return DirectiveDispatcher(glossary, registry)


@pytest.fixture
def annotated_source() -> str:
    """Return Python source containing two annotated blocks."""
    return dedent(
        """
        import flask

        # wsdoc {
        #   @title        Search Rentables
        #   @url          /v1/rentables/:BID?request={"search":"free text","max":"250"}
        #   @synopsis     Search the rentables of a business unit
        #   @method       POST
        #   @description  Returns the rentables of :BID that match the search.
        #   @input        SearchRequest
        #   @response     SearchResponse
        # wsdoc }
        def search_rentables():
            pass

        # wsdoc {
        #   @title     Get Rentable
        #   @url       /v1/rentable/:BID/:ID
        #   @method    GET
        #   @response  Rentable
        # wsdoc }
        def get_rentable():
            pass
        """
    ).lstrip()
