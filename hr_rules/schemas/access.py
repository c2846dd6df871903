"""경로 접근 제어 및 테넌트 도메인 Pydantic 스키마 정의.

Route access and tenant domain schema definitions.
Access decisions are a tagged union: AccessGranted | AccessDenied.
"""

from typing import Literal

from pydantic import BaseModel

from hr_rules.schemas.enums import AccessDenialReason, TenantDomainErrorCode


class AccessGranted(BaseModel):
    """접근 허용 (Access allowed)."""

    allowed: Literal[True] = True


class AccessDenied(BaseModel):
    """접근 거부 — 거부 사유 포함 (Access denied with a reason)."""

    allowed: Literal[False] = False
    reason: AccessDenialReason


# 요청마다 새로 계산되며 저장되지 않음 (Computed per request, never stored)
RouteAccessDecision = AccessGranted | AccessDenied


class RouteAccessRequest(BaseModel):
    """경로 접근 판정 요청.

    Attributes:
        path: 요청 경로, 로케일 접두어 포함 가능 (Request path, may carry /vi, /en, /ja)
        role: 사용자 역할 문자열 (User role from JWT claims)
        tenant_domain: 테넌트 도메인 (Tenant domain from JWT claims)
    """

    path: str
    role: str | None = None
    tenant_domain: str | None = None


class TenantDomainValidationResult(BaseModel):
    """테넌트 도메인 형식 검증 결과."""

    valid: bool
    error_code: TenantDomainErrorCode | None = None
