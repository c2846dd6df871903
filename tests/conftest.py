"""테스트 인프라 — httpx 클라이언트, JWT 토큰, 회사 설정 픽스처.

Test infrastructure — httpx client, JWT token helpers and settings fixtures.
The rule services are pure, so no database or external service is needed.
"""

from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from hr_rules.config import settings
from hr_rules.main import app
from hr_rules.schemas.enums import (
    AllowanceType,
    BreakType,
    DeductionType,
    RoundingDirection,
    SalaryType,
    WorkMode,
)
from hr_rules.schemas.settings import (
    AllowanceConfig,
    AllowanceRule,
    AttendanceConfig,
    BreakConfig,
    BreakPeriodConfig,
    CompanySettings,
    DeductionConfig,
    DeductionRule,
    OvertimeConfig,
    PayrollConfig,
    WorkModeConfig,
)


# ---------------------------------------------------------------------------
# HTTP 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — 리다이렉트는 따라가지 않습니다."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", follow_redirects=False) as ac:
        yield ac


# ---------------------------------------------------------------------------
# JWT 헬퍼: 외부 인증 서비스가 발급하는 토큰을 흉내냅니다
# ---------------------------------------------------------------------------
def make_token(
    role: str | None = None,
    tenant_domain: str | None = None,
    expires_in: timedelta = timedelta(minutes=30),
    secret: str | None = None,
) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    payload: dict[str, Any] = {
        "sub": "user@test.com",
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    if role is not None:
        payload["role"] = role
    if tenant_domain is not None:
        payload["tenantDomain"] = tenant_domain
    return jwt.encode(payload, secret or settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def hhmm(minutes: int) -> str:
    """분 단위 정수를 "HH:MM" 문자열로 변환 (하루 단위로 순환)."""
    minutes %= 1440
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


# ---------------------------------------------------------------------------
# 회사 설정 픽스처: 모든 필드가 채워진 완성 상태
# ---------------------------------------------------------------------------
def build_complete_settings() -> CompanySettings:
    return CompanySettings(
        attendance_config=AttendanceConfig(
            default_work_start_time="09:00",
            default_work_end_time="18:00",
            default_break_minutes=60,
            late_grace_minutes=5,
            early_leave_grace_minutes=5,
            require_geo_location=True,
            geo_fence_radius_meters=200,
        ),
        payroll_config=PayrollConfig(
            default_salary_type=SalaryType.MONTHLY,
            pay_day=25,
            cutoff_day=20,
            salary_rounding=RoundingDirection.NEAREST,
            standard_working_days_per_month=22,
            standard_working_hours_per_day=8,
        ),
        overtime_config=OvertimeConfig(
            overtime_enabled=True,
            standard_working_hours=8,
            night_start_time="22:00",
            night_end_time="05:00",
            regular_overtime_rate=1.25,
            night_work_rate=1.25,
            night_overtime_rate=1.5,
            holiday_overtime_rate=1.35,
            holiday_night_overtime_rate=1.6,
            locale="ja",
            max_overtime_hours_per_day=4,
            max_overtime_hours_per_month=45,
        ),
        break_config=BreakConfig(
            break_type=BreakType.UNPAID,
            default_break_minutes=60,
            minimum_break_minutes=45,
            maximum_break_minutes=90,
            max_breaks_per_day=3,
            night_shift_start_time="22:00",
            night_shift_end_time="05:00",
            night_shift_minimum_break_minutes=45,
            night_shift_default_break_minutes=60,
            fixed_break_periods=[
                BreakPeriodConfig(name="Lunch", start_time="12:00", end_time="13:00", duration_minutes=60),
            ],
        ),
        allowance_config=AllowanceConfig(
            allowances=[
                AllowanceRule(code="TRANSPORT", name="Transport", type=AllowanceType.FIXED, amount=10000),
            ],
        ),
        deduction_config=DeductionConfig(
            deductions=[
                DeductionRule(code="INSURANCE", name="Insurance", type=DeductionType.PERCENTAGE, percentage=8.5),
            ],
            enable_late_penalty=True,
            late_penalty_per_minute=100,
        ),
    )


@pytest.fixture
def complete_settings() -> CompanySettings:
    return build_complete_settings()


@pytest.fixture
def fixed_hours_work_mode() -> WorkModeConfig:
    return WorkModeConfig(
        mode=WorkMode.FIXED_HOURS,
        default_work_start_time="09:00",
        default_work_end_time="18:00",
        default_break_minutes=60,
    )
