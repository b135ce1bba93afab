from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .api import status
from .api.auth import UnauthorizedError

app = FastAPI(title="Host Status Probe")

app.include_router(status.router, tags=["status"])


@app.exception_handler(UnauthorizedError)
async def unauthorized_handler(request: Request, exc: UnauthorizedError) -> PlainTextResponse:
    return PlainTextResponse(
        "Unauthorized",
        status_code=401,
        headers={"WWW-Authenticate": "Bearer"},
    )
