from dataclasses import dataclass, field


@dataclass(slots=True)
class HttpRequest:
    """A request as delivered by the ingress layer (FastAPI or API Gateway)."""

    method: str
    path: str
    path_params: dict[str, str] | None = None
    query_params: dict[str, str] | None = None
    headers: dict[str, str] = field(default_factory=dict)
    # Raw bytes when the ingress hands them over undecoded.
    body: str | bytes | None = None


@dataclass(slots=True)
class HttpResponse:
    status_code: int
    headers: dict[str, str]
    body: str = ""
