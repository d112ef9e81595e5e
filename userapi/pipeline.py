"""Request pipeline - ordered stages wrapping every request.

Each stage receives the request and a ``call_next`` continuation for the
rest of the chain. A stage either awaits ``call_next`` (pass through) or
returns its own response (terminate). ``compose`` wires stages so the
first one in the list is outermost; ``RequestPipeline`` mounts the
composed chain on the app as a single Starlette middleware.
"""

import hmac
import logging
from typing import Awaitable, Callable, Iterable, Optional, Protocol, Sequence, runtime_checkable

from fastapi import Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]

PUBLIC_PATHS = ("/", "/error")
INTERNAL_ERROR_MESSAGE = "An internal server error occurred"
GENERIC_ERROR_DETAIL = "Please try again later"


@runtime_checkable
class Stage(Protocol):
    """One link in the request pipeline."""

    async def handle(self, request: Request, call_next: CallNext) -> Response:
        ...


def compose(stages: Sequence[Stage], terminal: CallNext) -> CallNext:
    """Compose stages around a terminal handler.

    Args:
        stages: Ordered stages (first = outermost)
        terminal: Handler invoked after the innermost stage

    Returns:
        Single async callable running the whole chain
    """
    chain = terminal
    for stage in reversed(stages):
        def make_link(s: Stage, nxt: CallNext) -> CallNext:
            async def link(request: Request) -> Response:
                return await s.handle(request, nxt)
            return link
        chain = make_link(stage, chain)
    return chain


class RecoveryStage:
    """Turn any unhandled exception into a 500 JSON response."""

    def __init__(self, expose_details: bool = False):
        self.expose_details = expose_details

    async def handle(self, request: Request, call_next: CallNext) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                "Error occurred for %s %s", request.method, request.url.path
            )
            details = str(exc) if self.expose_details else GENERIC_ERROR_DETAIL
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": INTERNAL_ERROR_MESSAGE, "details": details},
            )


class AuthenticationStage:
    """Require the shared secret on every path outside the allow-list.

    The ``Authorization`` header may carry the secret as is or as
    ``Bearer <secret>``.
    """

    def __init__(
        self,
        token: str,
        public_paths: Iterable[str] = PUBLIC_PATHS,
        header: str = "Authorization",
    ):
        if not token:
            raise ValueError("Authentication token must not be empty")
        self._token = token.encode("utf-8")
        self.public_paths = frozenset(p.lower() for p in public_paths)
        self.header = header

    def is_public(self, path: str) -> bool:
        return path.lower() in self.public_paths

    def extract_token(self, request: Request) -> Optional[str]:
        """Return the presented token, or None if the header is absent."""
        value = request.headers.get(self.header)
        if value is None:
            return None
        scheme, _, credentials = value.partition(" ")
        if credentials and scheme.lower() == "bearer":
            return credentials.strip()
        return value

    def is_authorized(self, token: Optional[str]) -> bool:
        if not token:
            return False
        return hmac.compare_digest(token.encode("utf-8"), self._token)

    async def handle(self, request: Request, call_next: CallNext) -> Response:
        if self.is_public(request.url.path):
            return await call_next(request)

        if not self.is_authorized(self.extract_token(request)):
            logger.warning(
                "Unauthorized %s %s", request.method, request.url.path
            )
            return PlainTextResponse(
                "Unauthorized", status_code=status.HTTP_401_UNAUTHORIZED
            )

        return await call_next(request)


class LoggingStage:
    """Log each request line and the status code it produced."""

    async def handle(self, request: Request, call_next: CallNext) -> Response:
        logger.info("%s %s", request.method, request.url.path)
        try:
            response = await call_next(request)
        except Exception:
            # Recovery maps the fault to a 500 further out.
            logger.info("Response: %d", status.HTTP_500_INTERNAL_SERVER_ERROR)
            raise
        logger.info("Response: %d", response.status_code)
        return response


def default_stages(auth_token: str, expose_details: bool = False) -> list:
    """Standard stage order: recovery, authentication, logging."""
    return [
        RecoveryStage(expose_details=expose_details),
        AuthenticationStage(auth_token),
        LoggingStage(),
    ]


class RequestPipeline(BaseHTTPMiddleware):
    """Starlette middleware running an ordered list of stages."""

    def __init__(self, app, stages: Sequence[Stage]):
        super().__init__(app)
        self.stages = list(stages)

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        return await compose(self.stages, call_next)(request)
