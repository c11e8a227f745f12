"""Tests for wren.app — registration surface and serving through the test client."""

import re
from unittest.mock import MagicMock, patch

import pytest

from wren import App, AppConfig, errorhandler
from wren.errors import ConfigurationError
from wren.routing.route import ErrorHandling, Normal
from wren.testing import TestClient


class TestRegistration:
    def test_direct_registration_returns_none(self) -> None:
        app = App()
        assert app.get("/", lambda req, res, next: None) is None
        assert len(app.registry) == 1

    def test_decorator_returns_function(self) -> None:
        app = App()

        @app.get("/")
        def index(request, response, next):
            response.end("hi")

        assert callable(index)
        assert app.registry.entries[0].handler == Normal(index)

    @pytest.mark.parametrize(
        ("method_name", "expected"),
        [
            ("get", "GET"),
            ("post", "POST"),
            ("put", "PUT"),
            ("patch", "PATCH"),
            ("delete", "DELETE"),
            ("head", "HEAD"),
            ("options", "OPTIONS"),
            ("all", None),
        ],
    )
    def test_verb_shortcuts(self, method_name: str, expected: str | None) -> None:
        app = App()
        getattr(app, method_name)("/", lambda req, res, next: None)
        assert app.registry.entries[0].method == expected

    def test_route_lowercase_method(self) -> None:
        app = App()
        app.route("get", "/", lambda req, res, next: None)
        assert app.registry.entries[0].method == "GET"

    def test_one_call_one_group(self) -> None:
        app = App()
        a = lambda req, res, next: next()  # noqa: E731
        app.get("/", a, [a, (a,)])
        app.get("/", a)
        groups = [entry.group_id for entry in app.registry]
        assert len(groups) == 4
        assert groups[0] == groups[1] == groups[2] != groups[3]

    def test_use_mounts(self) -> None:
        app = App()
        app.use(lambda req, res, next: next())
        entry = app.registry.entries[0]
        assert entry.method is None
        assert entry.matcher.match("/any/path") == []

    def test_use_decorator_with_error_handler(self) -> None:
        app = App()

        @app.use()
        @errorhandler
        def on_error(error, request, response, next):
            response.end(str(error))

        assert isinstance(on_error, ErrorHandling)
        assert app.registry.entries[0].handler is on_error

    def test_non_callable_rejected(self) -> None:
        app = App()
        with pytest.raises(ConfigurationError, match="must be callable"):
            app.get("/", "not a handler")
        assert len(app.registry) == 0


class TestServing:
    async def test_hello_world(self) -> None:
        app = App()

        @app.get("/")
        def index(request, response, next):
            response.end("Hello World!")

        async with TestClient(app) as client:
            ok = await client.get("/")
            other = await client.get("/other")
            wrong_method = await client.post("/")

        assert ok.status == 200
        assert ok.text == "Hello World!"
        assert other.status == 404
        assert other.text == "Not Found"
        assert wrong_method.status == 404

    async def test_path_params(self) -> None:
        app = App()

        @app.get(re.compile(r"/hello/(.+)"))
        def hello(request, response, next):
            response.end(f"Hello {request.params[0]}!")

        async with TestClient(app) as client:
            response = await client.get("/hello/World")
        assert response.text == "Hello World!"

    async def test_encoded_question_mark_in_path(self) -> None:
        app = App()

        @app.get(re.compile(r"/files/(.+)"))
        def files(request, response, next):
            response.end(request.params[0])

        async with TestClient(app) as client:
            response = await client.get("/files/a%3Fb?download=1")
        assert response.status == 200
        assert response.text == "a?b"

    async def test_query(self) -> None:
        app = App()

        @app.get("/search")
        def search(request, response, next):
            response.end(",".join(request.query.get_list("tag")))

        async with TestClient(app) as client:
            response = await client.get("/search?tag=a&tag=b")
        assert response.text == "a,b"

    async def test_post_body(self) -> None:
        app = App()

        @app.post("/echo")
        def echo(request, response, next):
            response.set_header("Content-Type", request.headers["content-type"])
            response.end(request.body)

        async with TestClient(app) as client:
            response = await client.post("/echo", json={"name": "wren"})
        assert response.header("content-type") == "application/json"
        assert response.text == '{"name": "wren"}'

    async def test_middleware_then_route(self) -> None:
        app = App()

        @app.use()
        def stamp(request, response, next):
            response.set_header("X-Served-By", "wren")
            request.state["greeting"] = "Hello"
            next()

        @app.get("/hello")
        def hello(request, response, next):
            response.end(request.state["greeting"] + " World!")

        async with TestClient(app) as client:
            response = await client.get("/hello")
        assert response.header("x-served-by") == "wren"
        assert response.text == "Hello World!"

    async def test_error_handler(self) -> None:
        app = App()

        @app.get("/")
        def boom(request, response, next):
            raise RuntimeError("Oops!")

        @app.use()
        @errorhandler
        def on_error(error, request, response, next):
            response.write_head(503, {"Content-Type": "text/plain"})
            response.end(str(error))

        async with TestClient(app) as client:
            response = await client.get("/")
        assert response.status == 503
        assert response.text == "Oops!"

    async def test_unhandled_error_is_500(self) -> None:
        app = App()

        @app.put("/")
        def boom(request, response, next):
            next(ValueError("bad input"))

        async with TestClient(app) as client:
            response = await client.put("/")
        assert response.status == 500
        assert response.text == "Internal Server Error"

    async def test_registration_after_first_request(self) -> None:
        app = App()
        async with TestClient(app) as client:
            before = await client.delete("/item")
            app.delete("/item", lambda req, res, next: res.end("deleted"))
            after = await client.delete("/item")
        assert before.status == 404
        assert after.text == "deleted"


class TestRun:
    @patch("wren.server.dev.run_server")
    def test_run_uses_config(self, mock_server: MagicMock) -> None:
        app = App(AppConfig(host="0.0.0.0", port=9000, debug=True, reload_dirs=("src",)))
        app.run()
        args, kwargs = mock_server.call_args
        assert args == (app, "0.0.0.0", 9000)
        assert kwargs["reload"] is True
        assert kwargs["reload_dirs"] == ("src",)

    @patch("wren.server.dev.run_server")
    def test_listen_overrides_port(self, mock_server: MagicMock) -> None:
        app = App()
        app.listen(3000)
        assert mock_server.call_args[0] == (app, "127.0.0.1", 3000)

    def test_dev_server_builds_pounce_config(self) -> None:
        pytest.importorskip("pounce")
        from wren.server.dev import run_server

        app = App()
        with patch("pounce.server.Server") as server_cls:
            run_server(app, "127.0.0.1", 3000, reload=True, workers=8, app_path="m:app")
        config, passed_app = server_cls.call_args[0]
        assert passed_app is app
        assert config.port == 3000
        assert config.workers == 1
        assert server_cls.call_args[1] == {"app_path": "m:app"}
        server_cls.return_value.run.assert_called_once()


class TestClientDocs:
    def test_test_client_docstring(self) -> None:
        assert TestClient.__doc__ is not None
        assert TestClient.__test__ is False
