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
"""Links to controller methods, carrying the affordances of related methods.

Usage::

    link = (
        link_to(method_on(OrderController).get_order("42"))
        .afford(method_on(OrderController).update_order("42", None))
        .with_self_rel()
    )
    link.href                   # "http://localhost/orders/42"
    link.affordances[0].http_method  # HttpMethod.PUT
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from flyhateoas.affordance import Affordance
from flyhateoas.builder import AffordanceBuilder
from flyhateoas.discoverer import AnnotationMappingDiscoverer, MappingDiscoverer
from flyhateoas.exceptions import MappingNotFoundException
from flyhateoas.invocation import MethodInvocation
from flyhateoas.mediatypes import CollectionJsonAffordanceModelFactory, HalFormsAffordanceModelFactory
from flyhateoas.plugin import PluginRegistry
from flyhateoas.uri import UriComponents

SELF = "self"


def default_affordance_builder() -> AffordanceBuilder:
    """Builder with every built-in media type registered."""
    return AffordanceBuilder(
        PluginRegistry.of(HalFormsAffordanceModelFactory(), CollectionJsonAffordanceModelFactory())
    )


@dataclass(frozen=True)
class Link:
    """A typed reference to a resource, optionally listing what can be done to it."""

    href: str
    rel: str = SELF
    affordances: tuple[Affordance, ...] = ()

    def and_affordances(self, affordances: Iterable[Affordance]) -> Link:
        return dataclasses.replace(self, affordances=(*self.affordances, *affordances))

    def to_dict(self) -> dict[str, Any]:
        return {"rel": self.rel, "href": self.href}


def uri_for(
    invocation: MethodInvocation,
    base: UriComponents,
    discoverer: MappingDiscoverer,
) -> UriComponents:
    """Resolve the URI *invocation* maps to below *base*, expanding path templates."""
    mapping = discoverer.get_mapping(invocation.target_type, invocation.method)
    if mapping is None:
        raise MappingNotFoundException(
            f"{invocation.target_type.__name__}.{invocation.method_name} has no request mapping",
            code="HATEOAS_MAPPING",
            context={"target": invocation.target_type.__name__, "method": invocation.method_name},
        )

    components = base.path_segment(mapping)
    type_mapping = discoverer.get_mapping(invocation.target_type) or ""
    type_variables = UriComponents(path=type_mapping).template_variables()

    variables: dict[str, Any] = dict(zip(type_variables, invocation.object_parameters, strict=False))
    variables.update(invocation.bound_arguments())
    return components.expand(**variables)


@dataclass(frozen=True)
class WebLinkBuilder:
    """Builds a :class:`Link` to a recorded controller method call."""

    components: UriComponents
    affordances: tuple[Affordance, ...] = ()
    discoverer: MappingDiscoverer = field(default_factory=AnnotationMappingDiscoverer)
    affordance_builder: AffordanceBuilder = field(default_factory=default_affordance_builder)
    base: UriComponents = field(default_factory=UriComponents)

    def afford(self, invocation: MethodInvocation) -> WebLinkBuilder:
        """Add the affordances of *invocation*'s method, addressed at its own URI."""
        components = uri_for(invocation, self.base, self.discoverer)
        created = self.affordance_builder.create(invocation, self.discoverer, components)
        return dataclasses.replace(self, affordances=(*self.affordances, *created))

    def with_rel(self, rel: str) -> Link:
        return Link(href=self.components.to_uri_string(), rel=rel, affordances=self.affordances)

    def with_self_rel(self) -> Link:
        return self.with_rel(SELF)

    def to_uri_string(self) -> str:
        return self.components.to_uri_string()


def link_to(
    invocation: MethodInvocation,
    base: UriComponents | None = None,
    *,
    discoverer: MappingDiscoverer | None = None,
    affordance_builder: AffordanceBuilder | None = None,
) -> WebLinkBuilder:
    """Start a link pointing at the URI *invocation* maps to."""
    base = base or UriComponents()
    discoverer = discoverer or AnnotationMappingDiscoverer()
    return WebLinkBuilder(
        components=uri_for(invocation, base, discoverer),
        discoverer=discoverer,
        affordance_builder=affordance_builder or default_affordance_builder(),
        base=base,
    )
