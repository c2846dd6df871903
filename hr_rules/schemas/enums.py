"""열거형 상수 모듈 — 근태/급여 설정과 접근 제어에서 사용하는 고정 값 집합.

Enumeration constants module.
Single source of truth for every fixed value set used by the rule services:
work modes, user roles, configuration enums, result codes and denial reasons.
All members are str-valued so they serialize as plain strings in JSON.
"""

from enum import Enum


# === 근무 방식 (Work mode) ===

class WorkMode(str, Enum):
    """회사 근무 방식 (Company work mode)."""

    FIXED_HOURS = "FIXED_HOURS"  # 고정 근무시간: default hours required
    FLEXIBLE_SHIFT = "FLEXIBLE_SHIFT"  # 유연 근무/교대: hours come from shifts


# === 사용자 역할 (User roles) ===

class UserRole(str, Enum):
    """플랫폼 사용자 역할 (Platform user roles).

    *_TAMABEE roles belong to platform staff, *_COMPANY roles to tenant users.
    """

    ADMIN_TAMABEE = "ADMIN_TAMABEE"
    MANAGER_TAMABEE = "MANAGER_TAMABEE"
    EMPLOYEE_TAMABEE = "EMPLOYEE_TAMABEE"
    ADMIN_COMPANY = "ADMIN_COMPANY"
    MANAGER_COMPANY = "MANAGER_COMPANY"
    EMPLOYEE_COMPANY = "EMPLOYEE_COMPANY"


# 플랫폼 관리 콘솔 접근 가능 역할 (Roles allowed into /admin)
TAMABEE_ADMIN_ROLES: frozenset[UserRole] = frozenset({
    UserRole.ADMIN_TAMABEE,
    UserRole.MANAGER_TAMABEE,
})

# 지원 센터 접근 가능 역할 (Roles allowed into /support)
TAMABEE_ROLES: frozenset[UserRole] = frozenset({
    UserRole.EMPLOYEE_TAMABEE,
    UserRole.ADMIN_TAMABEE,
    UserRole.MANAGER_TAMABEE,
})


# === 근태/급여 설정 값 (Attendance & payroll configuration values) ===

class RoundingInterval(str, Enum):
    MINUTES_5 = "MINUTES_5"
    MINUTES_10 = "MINUTES_10"
    MINUTES_15 = "MINUTES_15"
    MINUTES_30 = "MINUTES_30"
    MINUTES_60 = "MINUTES_60"


class RoundingDirection(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    NEAREST = "NEAREST"


class SalaryType(str, Enum):
    MONTHLY = "MONTHLY"
    DAILY = "DAILY"
    HOURLY = "HOURLY"
    SHIFT_BASED = "SHIFT_BASED"


class AllowanceType(str, Enum):
    FIXED = "FIXED"
    CONDITIONAL = "CONDITIONAL"
    ONE_TIME = "ONE_TIME"


class DeductionType(str, Enum):
    FIXED = "FIXED"
    PERCENTAGE = "PERCENTAGE"


class BreakType(str, Enum):
    PAID = "PAID"
    UNPAID = "UNPAID"


# === 설정 완성도 (Settings completeness) ===

class IncompleteSettingType(str, Enum):
    """설정 탭 종류 — 미완성 항목이 속한 설정 탭 (Settings tab of an incomplete entry)."""

    WORK_MODE = "workMode"
    ATTENDANCE = "attendance"
    PAYROLL = "payroll"
    OVERTIME = "overtime"
    BREAK = "break"
    ALLOWANCE = "allowance"
    DEDUCTION = "deduction"


class Severity(str, Enum):
    WARNING = "warning"  # 필드 단위 누락/범위 오류 (Field-level issue)
    ERROR = "error"  # 섹션 전체 미설정 (Whole section not configured)


# === 검증 결과 코드 (Validation result codes) ===

class BreakErrorCode(str, Enum):
    """휴게 시간 검증 오류 코드 (Break validation error codes)."""

    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    BREAK_START_AFTER_END = "BREAK_START_AFTER_END"
    BREAK_OUTSIDE_WORK_HOURS = "BREAK_OUTSIDE_WORK_HOURS"
    BREAK_PERIODS_OVERLAP = "BREAK_PERIODS_OVERLAP"


class AccessDenialReason(str, Enum):
    """경로 접근 거부 사유 (Route access denial reasons)."""

    UNAUTHORIZED_ROLE = "unauthorized_role"
    MISSING_TENANT_DOMAIN = "missing_tenant_domain"


class TenantDomainErrorCode(str, Enum):
    """테넌트 도메인 검증 오류 코드 (Tenant domain validation error codes)."""

    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    INVALID_CHARS = "INVALID_CHARS"
    INVALID_HYPHEN = "INVALID_HYPHEN"
