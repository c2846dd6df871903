"""HR 규칙 API 엔트리포인트 — 경로 가드, 로깅, 규칙 라우터 조립.

HR rules API entry point — Assembles the route guard, request logging,
CORS and the rule routers mounted under /api/v1.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hr_rules.api.rules import rules_router
from hr_rules.config import settings
from hr_rules.middleware.axiom_logging import AxiomLoggingMiddleware
from hr_rules.middleware.route_guard import RouteGuardMiddleware

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# 미들웨어는 나중에 등록한 것이 바깥쪽: The last registered middleware runs first.
# 경로 가드 → Axiom 로깅 → CORS 순으로 감싸므로 로깅이 가드의 리다이렉트까지 기록
# Guard is innermost so the logging middleware also records its redirects.
app.add_middleware(RouteGuardMiddleware)
app.add_middleware(AxiomLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """헬스 체크 — 경로 가드와 로깅 대상에서 제외.

    Liveness probe; skipped by both the route guard and request logging.
    """
    return {"status": "ok"}


app.include_router(rules_router, prefix="/api/v1")
