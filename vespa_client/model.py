from enum import Enum

from pydantic import BaseModel, ConfigDict

from vespa_client.common import TransportError, UnreadyError


class ParentModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class ServiceClass(str, Enum):
    deploy = "deploy"
    query = "query"
    document = "document"

    @property
    def label(self) -> str:
        return _SERVICE_LABELS[self]


_SERVICE_LABELS = {
    ServiceClass.deploy: "Deploy API",
    ServiceClass.query: "Query API",
    ServiceClass.document: "Document API",
}

DEFAULT_ALIAS = "local"

# maps (alias, service class) to the base URL it stands for
ALIAS_URLS: dict[tuple[str, ServiceClass], str] = {
    ("local", ServiceClass.deploy): "http://127.0.0.1:19071",
    ("local", ServiceClass.query): "http://127.0.0.1:8080",
    ("local", ServiceClass.document): "http://127.0.0.1:8080",
}

STATUS_PATH = "ApplicationStatus"


class Target(ParentModel):
    service: ServiceClass
    url: str


class StatusResult(ParentModel):
    target: Target
    status_code: int | None = None
    error: str | None = None

    @property
    def ready(self) -> bool:
        return self.error is None and self.status_code is not None and 200 <= self.status_code < 300

    def raise_for_status(self) -> "StatusResult":
        """
        Raise an exception if the probed service is not ready.

        Returns:
            this result if the service is ready

        Raises:
            TransportError: if the service could not be reached
            UnreadyError: if the service answered with a non-2xx status code
        """
        if self.error is not None:
            raise TransportError(self.target, self.error)

        if not self.ready:
            raise UnreadyError(self.target, self.status_code)

        return self
