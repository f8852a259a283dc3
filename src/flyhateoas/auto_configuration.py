# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Wire an AffordanceBuilder from configuration."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from flyhateoas.builder import AffordanceBuilder
from flyhateoas.config import Config, HateoasProperties
from flyhateoas.exceptions import UnsupportedMediaTypeException
from flyhateoas.factory import AffordanceModelFactory
from flyhateoas.mediatypes import (
    COLLECTION_JSON,
    HAL_FORMS_JSON,
    CollectionJsonAffordanceModelFactory,
    HalFormsAffordanceModelFactory,
)
from flyhateoas.plugin import PluginRegistry
from flyhateoas.uri import UriComponents

logger = structlog.get_logger("flyhateoas.auto_configuration")

_FACTORIES: dict[str, Callable[[], AffordanceModelFactory]] = {
    HAL_FORMS_JSON: HalFormsAffordanceModelFactory,
    COLLECTION_JSON: CollectionJsonAffordanceModelFactory,
}


def create_factory_registry(properties: HateoasProperties) -> PluginRegistry[AffordanceModelFactory, str]:
    """Registry holding one factory per configured media type, in configured order."""
    factories: list[AffordanceModelFactory] = []
    for media_type in properties.media_types:
        factory_cls = _FACTORIES.get(media_type)
        if factory_cls is None:
            raise UnsupportedMediaTypeException(
                f"No affordance model factory for media type '{media_type}'",
                code="HATEOAS_MEDIA_TYPE",
                context={"media_type": media_type, "supported": sorted(_FACTORIES)},
            )
        factories.append(factory_cls())
    return PluginRegistry(factories)


def create_affordance_builder(config: Config | None = None) -> AffordanceBuilder:
    """Build an :class:`AffordanceBuilder` for the ``hateoas.media_types`` setting."""
    properties = (config or Config()).bind(HateoasProperties)
    registry = create_factory_registry(properties)
    logger.info("affordance_builder_configured", media_types=list(properties.media_types))
    return AffordanceBuilder(registry)


def base_uri(config: Config | None = None) -> UriComponents:
    """The configured ``hateoas.base_uri`` as URI components."""
    properties = (config or Config()).bind(HateoasProperties)
    return UriComponents.from_uri_string(properties.base_uri)
