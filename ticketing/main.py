from typing import Annotated

from fastapi import Depends, FastAPI, Request, Response

from ticketing.api.dependencies import get_ticket_router
from ticketing.api.router import TicketRouter
from ticketing.core.config import get_settings
from ticketing.core.logging import configure_logging
from ticketing.models.http import HttpRequest

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    debug=settings.app_debug,
)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "environment": settings.app_env}


@app.api_route(
    "/{full_path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def dispatch_request(
    request: Request,
    ticket_router: Annotated[TicketRouter, Depends(get_ticket_router)],
) -> Response:
    raw_body = await request.body()
    http_request = HttpRequest(
        method=request.method,
        path=request.url.path,
        query_params=dict(request.query_params),
        headers=dict(request.headers),
        body=raw_body or None,
    )
    result = await ticket_router.dispatch(http_request)
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
