"""FastAPI 의존성 주입 모듈 — 토큰 클레임 추출.

FastAPI dependency injection module — Access claims from the bearer token.

Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. HTTPBearer가 토큰을 추출 (HTTPBearer extracts the token)
    3. decode_token()이 JWT를 검증하고 페이로드를 반환
       (decode_token verifies JWT and returns payload)
    4. 역할/테넌트 도메인 클레임을 반환 (Role and tenant domain claims returned)
"""

from typing import Annotated

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from hr_rules.utils.exceptions import UnauthorizedError
from hr_rules.utils.jwt import AccessClaims, decode_token, extract_access_claims

# HTTP Bearer 토큰 추출기: 헤더가 없으면 401을 직접 발생시키기 위해 auto_error=False
# (Extracts the bearer token; auto_error=False so a missing header becomes our 401)
security: HTTPBearer = HTTPBearer(auto_error=False)


async def get_token_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> AccessClaims:
    """JWT 토큰에서 접근 판정용 클레임을 추출합니다.

    Decode the bearer token and return its access claims.

    Raises:
        UnauthorizedError(401): 토큰 없음, 만료, 또는 유효하지 않음
                                (Missing, expired, or invalid token)
    """
    if credentials is None:
        raise UnauthorizedError()
    try:
        payload: dict = decode_token(credentials.credentials)
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("Token expired")
    except jwt.InvalidTokenError:
        raise UnauthorizedError("Invalid token")
    return extract_access_claims(payload)
