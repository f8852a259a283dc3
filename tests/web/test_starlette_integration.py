"""End-to-end: render HAL-FORMS templates from a Starlette endpoint."""

from pydantic import BaseModel
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from flyhateoas.auto_configuration import create_affordance_builder
from flyhateoas.config import Config
from flyhateoas.invocation import method_on
from flyhateoas.link import link_to
from flyhateoas.mappings import get_mapping, put_mapping, request_mapping
from flyhateoas.mediatypes import HAL_FORMS_JSON
from flyhateoas.params import Body, PathVar
from flyhateoas.uri import UriComponents


class TaskRequest(BaseModel):
    title: str
    done: bool = False


@request_mapping("/tasks")
class TaskController:
    @get_mapping("/{task_id}")
    async def get_task(self, task_id: PathVar[int]) -> dict:
        return {}

    @put_mapping("/{task_id}")
    async def update_task(self, task_id: PathVar[int], body: Body[TaskRequest]) -> dict:
        return {}


async def task_endpoint(request: Request) -> JSONResponse:
    task_id = int(request.path_params["task_id"])
    builder = create_affordance_builder(Config({"hateoas": {"media_types": [HAL_FORMS_JSON]}}))
    controller = method_on(TaskController)
    link = (
        link_to(controller.get_task(task_id), UriComponents.from_request(request), affordance_builder=builder)
        .afford(controller.update_task(task_id, None))
        .with_self_rel()
    )
    templates = {
        "default" if i == 0 else a.name: a.get_affordance_model(HAL_FORMS_JSON).to_dict()
        for i, a in enumerate(link.affordances)
    }
    body = {"id": task_id, "_links": {link.rel: {"href": link.href}}, "_templates": templates}
    return JSONResponse(body, media_type=HAL_FORMS_JSON)


def _app() -> Starlette:
    return Starlette(routes=[Route("/tasks/{task_id}", task_endpoint)])


class TestHalFormsEndpoint:
    def test_renders_self_link_and_template(self):
        client = TestClient(_app())
        response = client.get("/tasks/5")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith(HAL_FORMS_JSON)
        assert response.json() == {
            "id": 5,
            "_links": {"self": {"href": "http://testserver/tasks/5"}},
            "_templates": {
                "default": {
                    "method": "PUT",
                    "properties": [
                        {"name": "title", "required": True},
                        {"name": "done", "required": False},
                    ],
                    "target": "http://testserver/tasks/5",
                }
            },
        }
