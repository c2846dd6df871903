"""애플리케이션 환경 설정 모듈.

Application configuration module using pydantic-settings.
All settings can be overridden via environment variables or a .env file.
"""

from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

# .env 파일 절대 경로: CWD와 무관하게 항상 프로젝트 루트의 .env를 참조
# Absolute path to the project root .env file
_ENV_FILE: Path = Path(__file__).resolve().parent.parent / ".env"


class Settings(BaseSettings):
    """애플리케이션 전역 설정 — 환경 변수 기반 구성.

    Global application settings loaded from environment variables.
    Uses pydantic-settings for automatic env var parsing and .env file support.

    Attributes:
        APP_NAME: 애플리케이션 표시 이름 (Application display name)
        DEBUG: 디버그 모드 플래그 (Debug mode flag)
        JWT_SECRET_KEY: JWT 검증 비밀키 (JWT verification secret key)
        JWT_ALGORITHM: JWT 서명 알고리즘 (JWT signing algorithm)
        SUPPORTED_LOCALES: URL 경로 접두어로 허용되는 로케일 (Locale path prefixes)
        DEFAULT_LOCALE: 기본 로케일 (Fallback locale for redirects)
        ROUTE_GUARD_ENABLED: 페이지 경로 접근 제어 사용 여부 (Enables route guard middleware)
        ACCESS_TOKEN_COOKIE: 액세스 토큰 쿠키 이름 (Cookie holding the access token)
        UNAUTHORIZED_PATH: 접근 거부 시 리다이렉트 경로 (Redirect target on denial)
        CORS_ORIGINS: 허용된 CORS 출처 목록 (Allowed CORS origin URLs)
    """

    # 앱 메타데이터: Application metadata
    APP_NAME: str = "HR Rules API"
    DEBUG: bool = True

    # JWT 검증 설정: tokens are issued by the external identity service, only verified here
    JWT_SECRET_KEY: str = "change-this-secret-key-in-production"  # 운영 환경에서 반드시 변경 (MUST change in production)
    JWT_ALGORITHM: str = "HS256"  # HMAC-SHA256 대칭 서명 (Symmetric signing algorithm)

    # 로케일 설정: Locale path prefixes (/vi/..., /en/..., /ja/...)
    SUPPORTED_LOCALES: List[str] = ["vi", "en", "ja"]
    DEFAULT_LOCALE: str = "vi"

    # 경로 접근 제어: Route guard middleware settings
    ROUTE_GUARD_ENABLED: bool = True
    ACCESS_TOKEN_COOKIE: str = "access_token"
    UNAUTHORIZED_PATH: str = "/unauthorized"

    # CORS 설정: 프론트엔드 개발 서버 허용 (Frontend dev server origins)
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Axiom 로깅 설정: Axiom observability platform settings
    AXIOM_API_TOKEN: str = ""  # Axiom API 토큰 (API token from Axiom dashboard)
    AXIOM_DATASET: str = ""  # Axiom 데이터셋 이름 (Dataset name for API logs)

    model_config = {"env_file": _ENV_FILE, "env_file_encoding": "utf-8"}


# 전역 설정 싱글턴 인스턴스: Global settings singleton instance
settings: Settings = Settings()
