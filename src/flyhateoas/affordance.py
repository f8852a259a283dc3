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
"""Affordances, the actions available on a resource, one per HTTP method."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, get_args, get_origin

from pydantic import BaseModel

from flyhateoas.mappings import HttpMethod
from flyhateoas.params import Body, PathVar, QueryParam, Valid

_BINDING_TYPES = {PathVar, QueryParam, Body}


@dataclass(frozen=True)
class InputProperty:
    """One field of an affordance's request body."""

    name: str
    required: bool
    type: Any = str


@dataclass(frozen=True)
class QueryParameter:
    """One query parameter an affordance accepts."""

    name: str
    required: bool


class AffordanceModel:
    """Media-type-specific rendering of an affordance's details."""

    media_type: str = ""

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError


class Affordance:
    """An action available on a resource, scoped to a single HTTP method.

    Holds one :class:`AffordanceModel` per media type. Models are attached
    while the affordance is being built and not changed afterwards.
    """

    def __init__(self, http_method: HttpMethod, method: Callable[..., Any]) -> None:
        self._http_method = http_method
        self._method = method
        self._affordance_models: dict[str, AffordanceModel] = {}

    @property
    def http_method(self) -> HttpMethod:
        return self._http_method

    @property
    def method(self) -> Callable[..., Any]:
        return self._method

    @property
    def name(self) -> str:
        return self._method.__name__

    @property
    def affordance_models(self) -> dict[str, AffordanceModel]:
        """Read-only view (a copy) of the models keyed by media type."""
        return dict(self._affordance_models)

    def add_affordance_model(self, media_type: str, model: AffordanceModel) -> None:
        self._affordance_models[media_type] = model

    def get_affordance_model(self, media_type: str) -> AffordanceModel | None:
        return self._affordance_models.get(media_type)

    # ------------------------------------------------------------------
    # Input shape
    # ------------------------------------------------------------------

    @property
    def input_type(self) -> type[BaseModel] | None:
        """Pydantic model bound as the request body, or ``None``."""
        for origin, inner, _default in self._binding_parameters():
            if origin is Body and isinstance(inner, type) and issubclass(inner, BaseModel):
                return inner
        return None

    def input_properties(self) -> list[InputProperty]:
        """Fields of :attr:`input_type` in declaration order."""
        model = self.input_type
        if model is None:
            return []
        return [
            InputProperty(name=name, required=info.is_required(), type=info.annotation)
            for name, info in model.model_fields.items()
        ]

    def query_parameters(self) -> list[QueryParameter]:
        params: list[QueryParameter] = []
        for origin, _inner, (name, default) in self._binding_parameters():
            if origin is QueryParam:
                params.append(QueryParameter(name=name, required=default is inspect.Parameter.empty))
        return params

    def _binding_parameters(self) -> list[tuple[Any, Any, tuple[str, Any]]]:
        """Return ``(binding origin, inner type, (name, default))`` per bound parameter.

        ``Valid[T]`` wrapping a binding type is unwrapped; standalone
        ``Valid[T]`` counts as ``Body[T]``.
        """
        hints = typing.get_type_hints(self._method, include_extras=True)
        sig = inspect.signature(self._method)
        result: list[tuple[Any, Any, tuple[str, Any]]] = []

        for name, param in sig.parameters.items():
            hint = hints.get(name)
            if hint is None:
                continue

            origin = get_origin(hint)
            if origin is Valid:
                inner_args = get_args(hint)
                if not inner_args:
                    continue
                hint = inner_args[0]
                origin = get_origin(hint)
                if origin not in _BINDING_TYPES:
                    hint = Body[hint]
                    origin = Body

            if origin not in _BINDING_TYPES:
                continue

            args = get_args(hint)
            inner = args[0] if args else str
            result.append((origin, inner, (name, param.default)))

        return result

    def __repr__(self) -> str:
        media = ", ".join(self._affordance_models)
        return f"{type(self).__name__}({self._http_method} {self.name} [{media}])"


class MvcAffordance(Affordance):
    """Affordance derived from a mapped controller method."""
