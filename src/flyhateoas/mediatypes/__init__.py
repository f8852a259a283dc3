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
"""Built-in media types: HAL-FORMS and Collection+JSON affordance models."""

from flyhateoas.mediatypes.collection_json import (
    CollectionJsonAffordanceModel,
    CollectionJsonAffordanceModelFactory,
)
from flyhateoas.mediatypes.constants import COLLECTION_JSON, HAL_FORMS_JSON
from flyhateoas.mediatypes.hal_forms import HalFormsAffordanceModel, HalFormsAffordanceModelFactory

__all__ = [
    "COLLECTION_JSON",
    "CollectionJsonAffordanceModel",
    "CollectionJsonAffordanceModelFactory",
    "HAL_FORMS_JSON",
    "HalFormsAffordanceModel",
    "HalFormsAffordanceModelFactory",
]
