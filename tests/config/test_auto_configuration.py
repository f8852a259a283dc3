"""Tests for building an AffordanceBuilder from configuration."""

import pytest

from flyhateoas.auto_configuration import base_uri, create_affordance_builder, create_factory_registry
from flyhateoas.builder import AffordanceBuilder
from flyhateoas.config import Config, HateoasProperties
from flyhateoas.exceptions import UnsupportedMediaTypeException
from flyhateoas.mediatypes import (
    COLLECTION_JSON,
    HAL_FORMS_JSON,
    CollectionJsonAffordanceModelFactory,
    HalFormsAffordanceModelFactory,
)


class TestCreateFactoryRegistry:
    def test_default_media_types(self):
        registry = create_factory_registry(HateoasProperties())
        assert [type(f) for f in registry] == [HalFormsAffordanceModelFactory, CollectionJsonAffordanceModelFactory]

    def test_configured_order_is_kept(self):
        registry = create_factory_registry(HateoasProperties(media_types=[COLLECTION_JSON, HAL_FORMS_JSON]))
        assert [f.media_type for f in registry] == [COLLECTION_JSON, HAL_FORMS_JSON]

    def test_unknown_media_type_raises(self):
        with pytest.raises(UnsupportedMediaTypeException) as exc_info:
            create_factory_registry(HateoasProperties(media_types=["application/hal+json"]))
        assert exc_info.value.context["media_type"] == "application/hal+json"


class TestCreateAffordanceBuilder:
    def test_without_config(self):
        builder = create_affordance_builder()
        assert isinstance(builder, AffordanceBuilder)
        assert len(builder.factories) == 2

    def test_single_media_type(self):
        config = Config({"hateoas": {"media_types": [HAL_FORMS_JSON]}})
        builder = create_affordance_builder(config)
        assert [f.media_type for f in builder.factories] == [HAL_FORMS_JSON]


class TestBaseUri:
    def test_default(self):
        assert base_uri().to_uri_string() == "http://localhost"

    def test_configured(self):
        config = Config({"hateoas": {"base_uri": "https://api.example.com:8443/v2"}})
        assert base_uri(config).to_uri_string() == "https://api.example.com:8443/v2"
