"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Sends one structured event per request to Axiom: method, path, status code,
duration, masked request body, error detail, and the route guard denial
reason when a page request was redirected.
Sensitive fields (password, token, secret) are automatically masked.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from hr_rules.config import settings

# 마스킹 대상 필드 패턴: Fields to mask in request bodies and params
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|access_token|refresh_token|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로: Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_MAX_BODY_CHARS: int = 2000
_MAX_ERROR_CHARS: int = 500


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


def _truncate(value: str, max_len: int) -> str:
    if len(value) > max_len:
        return value[:max_len] + "...(truncated)"
    return value


async def _read_json_body(request: Request) -> Any:
    """요청 본문을 JSON으로 읽어 마스킹합니다 (본문이 있는 메서드만)."""
    if request.method not in ("POST", "PUT", "PATCH"):
        return None
    body_bytes: bytes = await request.body()
    if not body_bytes:
        return None
    try:
        return mask_sensitive(json.loads(body_bytes))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "(non-json body)"


async def _error_detail(response: Response) -> tuple[Response, str]:
    """오류 응답 본문에서 사유를 꺼내고, 소비한 본문으로 응답을 다시 만듭니다.

    Extract the error reason from a >= 400 response and rebuild the response
    from the consumed body iterator.
    """
    resp_body = b""
    async for chunk in response.body_iterator:
        resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")

    try:
        error_data = json.loads(resp_body)
        detail = error_data.get("detail", error_data) if isinstance(error_data, dict) else error_data
        detail_text: str = detail if isinstance(detail, str) else json.dumps(detail, ensure_ascii=False)
    except (json.JSONDecodeError, UnicodeDecodeError):
        detail_text = resp_body.decode("utf-8", errors="replace")

    rebuilt = Response(
        content=resp_body,
        status_code=response.status_code,
        headers=dict(response.headers),
        media_type=response.media_type,
    )
    return rebuilt, _truncate(detail_text, _MAX_ERROR_CHARS)


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs all requests and responses to Axiom.
    Pass-through when AXIOM_API_TOKEN / AXIOM_DATASET are not configured.
    """

    def __init__(self, app: Any, client: AxiomClient | None = None) -> None:
        super().__init__(app)
        self._dataset: str = settings.AXIOM_DATASET
        self._client: AxiomClient | None = client
        if self._client is None and settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 제외 경로 또는 Axiom 미설정시 패스스루: Skip excluded paths / unconfigured Axiom
        if request.url.path in _SKIP_PATHS or self._client is None:
            return await call_next(request)

        start_time = time.time()
        request_body: Any = await _read_json_body(request)

        error_detail: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            if status_code >= 400:
                response, error_detail = await _error_detail(response)
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            log_event: dict[str, Any] = {
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": round((time.time() - start_time) * 1000, 2),
            }
            if request.query_params:
                log_event["query_params"] = mask_sensitive(dict(request.query_params))
            if request_body is not None:
                log_event["request_body"] = (
                    _truncate(request_body, _MAX_BODY_CHARS) if isinstance(request_body, str) else request_body
                )
            if error_detail:
                log_event["error"] = error_detail
            # 경로 가드 거부 사유: set by RouteGuardMiddleware on redirect
            access_denial: str | None = getattr(request.state, "access_denial", None)
            if access_denial:
                log_event["access_denial"] = access_denial

            try:
                self._client.ingest_events(self._dataset, [log_event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록: Never break request on log failure

        return response
