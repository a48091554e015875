import httpx
import pytest
from click.testing import CliRunner
from loguru import logger

from vespa_client.cli import app


class RecordingHandler:

    def __init__(self, status_code: int = 200, error: Exception | None = None):
        self.status_code = status_code
        self.error = error
        self.requests: list[httpx.Request] = []

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.error is not None:
            raise self.error

        return httpx.Response(self.status_code)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    monkeypatch.delenv("VESPA_TARGET", raising=False)
    monkeypatch.delenv("VESPA_TIMEOUT_SECS", raising=False)
    yield
    logger.disable("vespa_client")


@pytest.fixture()
def http_handler_factory():
    def _handler(status_code: int = 200, error: Exception | None = None):
        return RecordingHandler(status_code=status_code, error=error)

    return _handler


@pytest.fixture()
def http_handler(http_handler_factory):
    return http_handler_factory()


@pytest.fixture()
def http_client_factory():
    clients: list[httpx.Client] = []

    def _client(handler: RecordingHandler):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _client

    for c in clients:
        c.close()


@pytest.fixture()
def cli_runner():
    return CliRunner()


@pytest.fixture()
def invoke_cli(cli_runner, http_client_factory):
    def _invoke(handler: RecordingHandler, args: list[str]):
        return cli_runner.invoke(
            app,
            args, obj={"HTTP_CLIENT": http_client_factory(handler)}, color=True
        )

    return _invoke
