"""테넌트 도메인 검증 서비스.

Tenant Domain Service — Validates the subdomain a company registers under.
Rules are checked in order and the first failure wins:
    1. 길이 3~30자 (length 3..30)          → TOO_SHORT / TOO_LONG
    2. 소문자/숫자/하이픈만 (a-z, 0-9, "-") → INVALID_CHARS
    3. 하이픈으로 시작/끝나지 않음          → INVALID_HYPHEN
"""

import re

from hr_rules.schemas.access import TenantDomainValidationResult
from hr_rules.schemas.enums import TenantDomainErrorCode

MIN_DOMAIN_LENGTH: int = 3
MAX_DOMAIN_LENGTH: int = 30

_DOMAIN_CHARS = re.compile(r"[a-z0-9-]+")


class TenantDomainService:

    def validate_tenant_domain(self, domain: str) -> TenantDomainValidationResult:
        if len(domain) < MIN_DOMAIN_LENGTH:
            return TenantDomainValidationResult(valid=False, error_code=TenantDomainErrorCode.TOO_SHORT)
        if len(domain) > MAX_DOMAIN_LENGTH:
            return TenantDomainValidationResult(valid=False, error_code=TenantDomainErrorCode.TOO_LONG)
        if _DOMAIN_CHARS.fullmatch(domain) is None:
            return TenantDomainValidationResult(valid=False, error_code=TenantDomainErrorCode.INVALID_CHARS)
        if domain.startswith("-") or domain.endswith("-"):
            return TenantDomainValidationResult(valid=False, error_code=TenantDomainErrorCode.INVALID_HYPHEN)
        return TenantDomainValidationResult(valid=True)


tenant_domain_service: TenantDomainService = TenantDomainService()
