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
"""Exception hierarchy for fly-hateoas.

All library exceptions inherit from HateoasException so callers can catch
one type for every affordance-building failure, or a subclass for targeted
handling.

Categories:
- IllegalArgumentException: a collaborator was missing or malformed
- InvalidRequestException: mapping metadata describes something invalid
- PluginNotFoundException: no plugin registered for a selector
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class HateoasException(Exception):
    """Base exception for all fly-hateoas errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "HATEOAS_001").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class IllegalArgumentException(HateoasException, ValueError):
    """A required argument was ``None`` or otherwise unusable."""


# =============================================================================
# Mapping Exceptions
# =============================================================================


class InvalidRequestException(HateoasException):
    """Mapping metadata is syntactically present but semantically incorrect."""


class UnknownHttpMethodException(InvalidRequestException):
    """An HTTP method name does not match any known request method."""


class MappingNotFoundException(InvalidRequestException):
    """A method expected to carry a request mapping has none."""


class UnsupportedMediaTypeException(HateoasException):
    """A configured media type has no affordance model factory."""


# =============================================================================
# Plugin Exceptions
# =============================================================================


class PluginNotFoundException(HateoasException):
    """No plugin in the registry supports the requested selector."""
