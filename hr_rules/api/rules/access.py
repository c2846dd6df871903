"""경로 접근 판정 라우터 — 역할/테넌트 기반 페이지 접근 정책 조회.

Route access router — Exposes the route access policy and tenant domain rules.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from hr_rules.api.deps import get_token_claims
from hr_rules.schemas.access import (
    RouteAccessDecision,
    RouteAccessRequest,
    TenantDomainValidationResult,
)
from hr_rules.services.route_access_service import route_access_service
from hr_rules.services.tenant_domain_service import tenant_domain_service
from hr_rules.utils.jwt import AccessClaims

router: APIRouter = APIRouter()


@router.post("/access/check", response_model=RouteAccessDecision)
async def check_route_access(data: RouteAccessRequest) -> RouteAccessDecision:
    """주어진 역할/테넌트로 경로 접근 가능 여부를 판정합니다."""
    return route_access_service.check_route_access(data.path, data.role, data.tenant_domain)


@router.get("/access/me", response_model=RouteAccessDecision)
async def check_my_route_access(
    claims: Annotated[AccessClaims, Depends(get_token_claims)],
    path: Annotated[str, Query(min_length=1)],
) -> RouteAccessDecision:
    """현재 토큰의 클레임으로 경로 접근 가능 여부를 판정합니다.

    Decide access to `path` for the caller's own token claims.
    """
    return route_access_service.check_route_access(path, claims.role, claims.tenant_domain)


@router.get("/tenants/validate-domain", response_model=TenantDomainValidationResult)
async def validate_tenant_domain(
    domain: Annotated[str, Query()],
) -> TenantDomainValidationResult:
    return tenant_domain_service.validate_tenant_domain(domain)
