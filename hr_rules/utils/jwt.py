"""JWT 토큰 검증 유틸리티 모듈.

JWT token verification utility module.
Tokens are issued by the external identity service; this service only
verifies them and reads the claims needed for route access decisions.

JWT Payload Structure (relevant claims):
    {
        "sub": "user@example.com",     # 사용자 식별자 (User identifier)
        "role": "ADMIN_COMPANY",       # 사용자 역할 (UserRole value)
        "tenantDomain": "acme",        # 테넌트 도메인, Tamabee 직원은 "tamabee"
        "exp": 1234567890              # 만료 시간 UNIX timestamp (Expiration)
    }
"""

from typing import Any, NamedTuple

import jwt

from hr_rules.config import settings


class AccessClaims(NamedTuple):
    """경로 접근 판정에 필요한 클레임 (Claims used by the route access policy)."""

    role: str | None
    tenant_domain: str | None


# 익명 사용자: 토큰이 없거나 검증 실패 (Anonymous: no token or verification failed)
ANONYMOUS_CLAIMS: AccessClaims = AccessClaims(role=None, tenant_domain=None)


def decode_token(token: str) -> dict[str, Any]:
    """JWT 토큰을 디코딩하고 검증합니다.

    Decode and verify a JWT token string.
    Raises jwt.ExpiredSignatureError if the token has expired,
    and jwt.InvalidTokenError for any other validation failure.

    Args:
        token: JWT 토큰 문자열 (Encoded JWT token string)

    Returns:
        dict[str, Any]: 디코딩된 페이로드 딕셔너리 (Decoded payload dictionary)

    Raises:
        jwt.ExpiredSignatureError: 토큰 만료 시 (When token has expired)
        jwt.InvalidTokenError: 유효하지 않은 토큰 (When token is invalid)
    """
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])


def extract_access_claims(payload: dict[str, Any]) -> AccessClaims:
    """페이로드에서 역할과 테넌트 도메인을 꺼냅니다.

    Read role and tenant domain from a decoded payload.
    Accepts both "tenantDomain" and "tenant_domain" claim spellings;
    non-string values are ignored.
    """
    role: Any = payload.get("role")
    tenant_domain: Any = payload.get("tenantDomain", payload.get("tenant_domain"))
    return AccessClaims(
        role=role if isinstance(role, str) else None,
        tenant_domain=tenant_domain if isinstance(tenant_domain, str) else None,
    )


def read_access_claims(token: str | None) -> AccessClaims:
    """토큰을 검증하고 클레임을 반환 — 실패 시 익명 클레임.

    Verify a token and return its access claims.
    Missing, expired or invalid tokens yield ANONYMOUS_CLAIMS.
    """
    if not token:
        return ANONYMOUS_CLAIMS
    try:
        return extract_access_claims(decode_token(token))
    except jwt.InvalidTokenError:
        return ANONYMOUS_CLAIMS
