from mangum import Mangum

from doproject.handlers import project_handler, task_handler, user_handler


def paths(app):
    return set(app.openapi()["paths"])


def test_each_lambda_serves_its_own_routes():
    assert "/api/users/{user_id}" in paths(user_handler.app)
    assert "/api/projects/{project_id}" in paths(project_handler.app)
    assert "/api/tasks/{task_id}" in paths(task_handler.app)
    assert "/api/tasks/{task_id}" not in paths(project_handler.app)


def test_handlers_are_mangum_adapters():
    for module in (user_handler, project_handler, task_handler):
        assert isinstance(module.handler, Mangum)
