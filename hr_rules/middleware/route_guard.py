"""경로 접근 제어 미들웨어.

Route guard middleware.
Applies the route access policy to page requests. Claims come from the
Authorization bearer token or the access token cookie; a token that fails
verification is treated as anonymous. Denied requests are redirected to
the unauthorized page, keeping the locale prefix of the original path.
"""

from typing import Any
from urllib.parse import urlencode

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

from hr_rules.config import settings
from hr_rules.schemas.access import AccessDenied
from hr_rules.services.route_access_service import route_access_service
from hr_rules.utils.jwt import read_access_claims

# 검사 제외 경로: API와 문서 경로는 각자의 인증을 사용
# Paths excluded from the guard; API routes carry their own auth
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}
_SKIP_PREFIXES = ("/api/",)


def _request_token(request: Request) -> str | None:
    """Authorization 헤더 우선, 없으면 쿠키에서 토큰을 읽습니다."""
    authorization: str = request.headers.get("authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return request.cookies.get(settings.ACCESS_TOKEN_COOKIE)


def _locale_of(path: str) -> str:
    segments: list[str] = path.split("/")
    if len(segments) > 1 and segments[1] in settings.SUPPORTED_LOCALES:
        return segments[1]
    return settings.DEFAULT_LOCALE


def unauthorized_url(path: str, denial: AccessDenied) -> str:
    """거부 사유를 쿼리로 붙인 리다이렉트 URL (e.g. /ja/unauthorized?reason=unauthorized_role)."""
    query: str = urlencode({"reason": denial.reason.value})
    return f"/{_locale_of(path)}{settings.UNAUTHORIZED_PATH}?{query}"


class RouteGuardMiddleware(BaseHTTPMiddleware):
    """페이지 요청마다 경로 접근 정책을 적용하는 미들웨어.

    Middleware that evaluates the route access policy once per page request.
    The denial reason is stored on request.state for the logging middleware.
    """

    def __init__(self, app: Any, enabled: bool | None = None) -> None:
        super().__init__(app)
        self._enabled: bool = settings.ROUTE_GUARD_ENABLED if enabled is None else enabled

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path: str = request.url.path
        if not self._enabled or path in _SKIP_PATHS or path.startswith(_SKIP_PREFIXES):
            return await call_next(request)

        claims = read_access_claims(_request_token(request))
        decision = route_access_service.check_route_access(path, claims.role, claims.tenant_domain)

        if isinstance(decision, AccessDenied):
            request.state.access_denial = decision.reason.value
            return RedirectResponse(unauthorized_url(path, decision), status_code=307)

        return await call_next(request)
