"""규칙 API 라우터 패키지 — 모든 검증/판정 엔드포인트 통합.

Rules API Router package — Aggregates the validation and access endpoints
into a single router for inclusion in the FastAPI application.

Included routers:
    - breaks: 휴게 구간/기록 검증 (Break period and break record validation)
    - settings: 회사 설정 완성도 (Company settings completeness)
    - access: 경로 접근 판정, 테넌트 도메인 검증 (Route access, tenant domain)
"""

from fastapi import APIRouter

from hr_rules.api.rules.access import router as access_router
from hr_rules.api.rules.breaks import router as breaks_router
from hr_rules.api.rules.settings import router as settings_router

rules_router: APIRouter = APIRouter()

# 휴게: /breaks 하위 (Break validation)
rules_router.include_router(breaks_router, prefix="/breaks", tags=["Breaks"])
# 설정: /settings 하위 (Settings completeness)
rules_router.include_router(settings_router, prefix="/settings", tags=["Settings"])
# 접근 제어: /access, /tenants (Route access & tenant domains)
rules_router.include_router(access_router, tags=["Access"])
