"""Tests for HTTP method mapping decorators."""

import pytest

from flyhateoas.exceptions import UnknownHttpMethodException
from flyhateoas.mappings import (
    HttpMethod,
    delete_mapping,
    get_mapping,
    patch_mapping,
    post_mapping,
    put_mapping,
    request_mapping,
)


class TestRequestMapping:
    def test_class_level_path(self):
        @request_mapping("/api/orders/")
        class MyController:
            pass

        assert MyController.__hateoas_request_mapping__ == "/api/orders"  # type: ignore[attr-defined]

    def test_preserves_class(self):
        @request_mapping("/api")
        class MyController:
            """My docstring."""

        assert MyController.__name__ == "MyController"
        assert MyController.__doc__ == "My docstring."

    def test_method_level_multiple_methods(self):
        class Ctrl:
            @request_mapping("/{id}", methods=["PUT", "PATCH"])
            async def update(self):
                pass

        assert Ctrl.update.__hateoas_mapping__ == {"methods": ["PUT", "PATCH"], "path": "/{id}"}

    def test_method_level_without_methods(self):
        class Ctrl:
            @request_mapping("/x")
            async def anything(self):
                pass

        assert Ctrl.anything.__hateoas_mapping__["methods"] == []

    def test_unknown_method_raises(self):
        with pytest.raises(UnknownHttpMethodException):

            @request_mapping("/", methods=["FETCH"])
            def handler():
                pass


class TestShortcuts:
    @pytest.mark.parametrize(
        ("decorator", "expected"),
        [
            (get_mapping, "GET"),
            (post_mapping, "POST"),
            (put_mapping, "PUT"),
            (patch_mapping, "PATCH"),
            (delete_mapping, "DELETE"),
        ],
    )
    def test_marks_method(self, decorator, expected):
        class Ctrl:
            @decorator("/{item_id}")
            async def handler(self):
                pass

        meta = Ctrl.handler.__hateoas_mapping__
        assert meta["methods"] == [expected]
        assert meta["path"] == "/{item_id}"

    def test_default_path(self):
        class Ctrl:
            @get_mapping()
            async def list_items(self):
                return []

        assert Ctrl.list_items.__hateoas_mapping__["path"] == ""

    def test_names(self):
        assert get_mapping.__name__ == "get_mapping"
        assert delete_mapping.__qualname__ == "delete_mapping"


class TestHttpMethod:
    def test_value_of(self):
        assert HttpMethod.value_of("PATCH") is HttpMethod.PATCH

    def test_value_of_is_case_sensitive(self):
        with pytest.raises(UnknownHttpMethodException) as exc_info:
            HttpMethod.value_of("get")
        assert exc_info.value.context == {"http_method": "get"}

    def test_is_string(self):
        assert HttpMethod.DELETE == "DELETE"
        assert str(HttpMethod.DELETE) == "DELETE"
