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
"""fly-hateoas — affordances (available actions per HTTP method) for resource links."""

from flyhateoas.affordance import Affordance, AffordanceModel, InputProperty, MvcAffordance, QueryParameter
from flyhateoas.builder import AffordanceBuilder
from flyhateoas.discoverer import AnnotationMappingDiscoverer, MappingDiscoverer
from flyhateoas.factory import AffordanceModelFactory
from flyhateoas.invocation import MethodInvocation, method_on
from flyhateoas.link import Link, WebLinkBuilder, link_to
from flyhateoas.mappings import (
    HttpMethod,
    delete_mapping,
    get_mapping,
    patch_mapping,
    post_mapping,
    put_mapping,
    request_mapping,
)
from flyhateoas.params import Body, PathVar, QueryParam, Valid
from flyhateoas.plugin import PluginRegistry, order
from flyhateoas.uri import UriComponents

__version__ = "0.1.0"

__all__ = [
    "Affordance",
    "AffordanceBuilder",
    "AffordanceModel",
    "AffordanceModelFactory",
    "AnnotationMappingDiscoverer",
    "Body",
    "HttpMethod",
    "InputProperty",
    "Link",
    "MappingDiscoverer",
    "MethodInvocation",
    "MvcAffordance",
    "PathVar",
    "PluginRegistry",
    "QueryParam",
    "QueryParameter",
    "UriComponents",
    "Valid",
    "WebLinkBuilder",
    "delete_mapping",
    "get_mapping",
    "link_to",
    "method_on",
    "order",
    "patch_mapping",
    "post_mapping",
    "put_mapping",
    "request_mapping",
]
