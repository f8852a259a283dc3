"""Tests for Collection+JSON affordance models."""

from pydantic import BaseModel

from flyhateoas.affordance import MvcAffordance
from flyhateoas.invocation import method_on
from flyhateoas.mappings import HttpMethod
from flyhateoas.mediatypes import COLLECTION_JSON, CollectionJsonAffordanceModelFactory
from flyhateoas.params import Body, QueryParam
from flyhateoas.uri import UriComponents


class BookRequest(BaseModel):
    isbn: str
    title: str


class BookController:
    async def search(self, author: QueryParam[str], page: QueryParam[int] = 0) -> list:
        return []

    async def add(self, body: Body[BookRequest]) -> dict:
        return {}

    async def remove(self, isbn: str) -> None:
        pass


TARGET = UriComponents(path="/books")


def _model(http_method, method, invocation):
    affordance = MvcAffordance(http_method, method)
    return CollectionJsonAffordanceModelFactory().get_affordance_model(affordance, invocation, TARGET)


class TestCollectionJsonFactory:
    def test_media_type(self):
        assert CollectionJsonAffordanceModelFactory.media_type == COLLECTION_JSON

    def test_body_method_renders_template(self):
        model = _model(HttpMethod.POST, BookController.add, method_on(BookController).add(None))
        assert model.to_dict() == {
            "data": [{"name": "isbn", "value": ""}, {"name": "title", "value": ""}],
        }

    def test_get_renders_query(self):
        model = _model(HttpMethod.GET, BookController.search, method_on(BookController).search("le guin"))
        assert model.to_dict() == {
            "rel": "search",
            "href": "http://localhost/books",
            "data": [{"name": "author", "value": ""}, {"name": "page", "value": ""}],
        }

    def test_delete_renders_nothing(self):
        model = _model(HttpMethod.DELETE, BookController.remove, method_on(BookController).remove("1"))
        assert model.to_dict() == {}
        assert model.input_properties == []
        assert model.media_type == COLLECTION_JSON
