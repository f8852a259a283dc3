"""Tests for Affordance input-shape reflection and model storage."""

from pydantic import BaseModel

from flyhateoas.affordance import Affordance, AffordanceModel, InputProperty, MvcAffordance, QueryParameter
from flyhateoas.mappings import HttpMethod
from flyhateoas.params import Body, PathVar, QueryParam, Valid


class AddressRequest(BaseModel):
    street: str
    zip_code: str
    country: str = "NL"


class AddressController:
    async def create(self, body: Body[AddressRequest]) -> dict:
        return {}

    async def validated(self, body: Valid[Body[AddressRequest]]) -> dict:
        return {}

    async def search(self, city: QueryParam[str], page: QueryParam[int] = 0, tenant: PathVar[str] = "") -> list:
        return []

    async def plain(self, value: int) -> None:
        pass


class StubModel(AffordanceModel):
    media_type = "application/stub"

    def to_dict(self):
        return {"stub": True}


class TestModels:
    def test_add_and_get_model(self):
        affordance = MvcAffordance(HttpMethod.POST, AddressController.create)
        model = StubModel()
        affordance.add_affordance_model("application/stub", model)
        assert affordance.get_affordance_model("application/stub") is model

    def test_missing_model_is_none(self):
        affordance = MvcAffordance(HttpMethod.POST, AddressController.create)
        assert affordance.get_affordance_model("application/other") is None

    def test_one_model_per_media_type(self):
        affordance = MvcAffordance(HttpMethod.POST, AddressController.create)
        first, second = StubModel(), StubModel()
        affordance.add_affordance_model("application/stub", first)
        affordance.add_affordance_model("application/stub", second)
        assert affordance.affordance_models == {"application/stub": second}

    def test_affordance_models_is_a_copy(self):
        affordance = MvcAffordance(HttpMethod.POST, AddressController.create)
        affordance.affordance_models["x"] = StubModel()
        assert affordance.affordance_models == {}

    def test_is_affordance(self):
        affordance = MvcAffordance(HttpMethod.GET, AddressController.search)
        assert isinstance(affordance, Affordance)
        assert affordance.http_method is HttpMethod.GET
        assert affordance.name == "search"
        assert "GET search" in repr(affordance)


class TestInputShape:
    def test_input_type_from_body(self):
        affordance = MvcAffordance(HttpMethod.POST, AddressController.create)
        assert affordance.input_type is AddressRequest

    def test_input_type_from_valid_body(self):
        affordance = MvcAffordance(HttpMethod.POST, AddressController.validated)
        assert affordance.input_type is AddressRequest

    def test_input_properties(self):
        affordance = MvcAffordance(HttpMethod.POST, AddressController.create)
        assert affordance.input_properties() == [
            InputProperty(name="street", required=True, type=str),
            InputProperty(name="zip_code", required=True, type=str),
            InputProperty(name="country", required=False, type=str),
        ]

    def test_no_body_means_no_input(self):
        affordance = MvcAffordance(HttpMethod.GET, AddressController.plain)
        assert affordance.input_type is None
        assert affordance.input_properties() == []

    def test_query_parameters(self):
        affordance = MvcAffordance(HttpMethod.GET, AddressController.search)
        assert affordance.query_parameters() == [
            QueryParameter(name="city", required=True),
            QueryParameter(name="page", required=False),
        ]
