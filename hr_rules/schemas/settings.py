"""회사 설정 Pydantic 스키마 — 근무 방식/근태/급여/초과근무/휴게/수당/공제.

Company settings request/response schemas.
Every scalar field is optional so that partially filled settings forms can be
checked for completeness; None means "not entered yet". A whole sub-config
set to None means that section has never been configured.
"""

from pydantic import BaseModel, Field

from hr_rules.schemas.enums import (
    AllowanceType,
    BreakType,
    DeductionType,
    IncompleteSettingType,
    RoundingDirection,
    RoundingInterval,
    SalaryType,
    Severity,
    WorkMode,
)


# === 근무 방식 (Work mode) ===

class WorkModeConfig(BaseModel):
    """근무 방식 설정 — 다른 설정보다 먼저 편집될 수 있어 별도로 전달됨.

    Work mode configuration. Supplied separately from CompanySettings because
    it can be edited before the rest of the settings exist.

    Attributes:
        mode: 근무 방식 (FIXED_HOURS or FLEXIBLE_SHIFT)
        default_work_start_time: 기본 출근 시각 — FIXED_HOURS에서 필수
        default_work_end_time: 기본 퇴근 시각 — FIXED_HOURS에서 필수
        default_break_minutes: 기본 휴게 시간(분)
    """

    mode: WorkMode
    default_work_start_time: str | None = None
    default_work_end_time: str | None = None
    default_break_minutes: int | None = None


# === 근태 (Attendance) ===

class RoundingConfig(BaseModel):
    interval: RoundingInterval
    direction: RoundingDirection


class AttendanceConfig(BaseModel):
    """근태 설정 (Attendance configuration)."""

    default_work_start_time: str | None = None  # "09:00"
    default_work_end_time: str | None = None  # "18:00"
    default_break_minutes: int | None = None
    enable_rounding: bool = False
    enable_check_in_rounding: bool = False
    enable_check_out_rounding: bool = False
    enable_break_start_rounding: bool = False
    enable_break_end_rounding: bool = False
    check_in_rounding: RoundingConfig | None = None
    check_out_rounding: RoundingConfig | None = None
    break_start_rounding: RoundingConfig | None = None
    break_end_rounding: RoundingConfig | None = None
    late_grace_minutes: int | None = None  # 지각 유예 0~60분
    early_leave_grace_minutes: int | None = None  # 조퇴 유예 0~60분
    require_device_registration: bool = False
    require_geo_location: bool = False
    geo_fence_radius_meters: int | None = None
    allow_mobile_check_in: bool = True
    allow_web_check_in: bool = True


# === 급여 (Payroll) ===

class PayrollConfig(BaseModel):
    """급여 설정 (Payroll configuration)."""

    default_salary_type: SalaryType | None = None
    pay_day: int | None = None  # 급여일 1~31
    cutoff_day: int | None = None  # 마감일 1~31
    salary_rounding: RoundingDirection | None = None
    standard_working_days_per_month: int | None = None
    standard_working_hours_per_day: int | None = None


# === 초과근무 (Overtime) ===

class OvertimeConfig(BaseModel):
    """초과근무 설정 — 모든 할증률은 1.0 이상 (All multipliers must be >= 1.0)."""

    overtime_enabled: bool = False
    standard_working_hours: int | None = None
    night_start_time: str | None = None  # "22:00"
    night_end_time: str | None = None  # "05:00"
    regular_overtime_rate: float | None = None  # 기본값 1.25
    night_work_rate: float | None = None  # 기본값 1.25
    night_overtime_rate: float | None = None  # 기본값 1.50
    holiday_overtime_rate: float | None = None  # 기본값 1.35
    holiday_night_overtime_rate: float | None = None  # 기본값 1.60
    use_legal_minimum: bool = False
    locale: str | None = None  # "ja" | "vi"
    require_approval: bool = False
    max_overtime_hours_per_day: int | None = None
    max_overtime_hours_per_month: int | None = None


# === 휴게 (Break) ===

class BreakPeriodConfig(BaseModel):
    """고정 휴게 구간 (Fixed break period inside BreakConfig)."""

    name: str = ""
    start_time: str | None = None
    end_time: str | None = None
    duration_minutes: int | None = None
    is_flexible: bool = False
    order: int = 0


class BreakConfig(BaseModel):
    """휴게 설정 (Break configuration)."""

    break_enabled: bool = True
    break_type: BreakType | None = None
    default_break_minutes: int | None = None
    minimum_break_minutes: int | None = None
    maximum_break_minutes: int | None = None
    use_legal_minimum: bool = False
    break_tracking_enabled: bool = False
    locale: str | None = None
    fixed_break_mode: bool = False
    break_periods_per_attendance: int | None = None
    fixed_break_periods: list[BreakPeriodConfig] = Field(default_factory=list)
    max_breaks_per_day: int | None = None
    night_shift_start_time: str | None = None
    night_shift_end_time: str | None = None
    night_shift_minimum_break_minutes: int | None = None
    night_shift_default_break_minutes: int | None = None


# === 수당 (Allowance) ===

class AllowanceRule(BaseModel):
    id: str | None = None
    code: str | None = None
    name: str = ""
    type: AllowanceType = AllowanceType.FIXED
    amount: float | None = None
    taxable: bool = False
    order: int | None = None


class AllowanceConfig(BaseModel):
    """수당 설정 — 수당이 하나도 없어도 완성된 것으로 본다 (An empty list is complete)."""

    allowances: list[AllowanceRule] = Field(default_factory=list)


# === 공제 (Deduction) ===

class DeductionRule(BaseModel):
    id: str | None = None
    code: str | None = None
    name: str = ""
    type: DeductionType = DeductionType.FIXED
    amount: float | None = None
    percentage: float | None = None  # 0~100
    order: int = 0


class DeductionConfig(BaseModel):
    """공제 설정 (Deduction configuration)."""

    deductions: list[DeductionRule] = Field(default_factory=list)
    enable_late_penalty: bool = False
    late_penalty_per_minute: float | None = None
    enable_early_leave_penalty: bool = False
    early_leave_penalty_per_minute: float | None = None
    enable_absence_deduction: bool = False


# === 회사 설정 전체 (Combined company settings) ===

class CompanySettings(BaseModel):
    """회사 설정 트리 — 각 섹션이 None 이면 미설정 (None section = not configured)."""

    attendance_config: AttendanceConfig | None = None
    payroll_config: PayrollConfig | None = None
    overtime_config: OvertimeConfig | None = None
    break_config: BreakConfig | None = None
    allowance_config: AllowanceConfig | None = None
    deduction_config: DeductionConfig | None = None


# === 완성도 검사 결과 (Completeness result) ===

class IncompleteSetting(BaseModel):
    """미완성 설정 항목 — 오류가 아닌 안내용 기록.

    Advisory record of one missing or out-of-range setting.

    Attributes:
        type: 해당 설정 탭 (Settings tab the entry belongs to)
        field_key: 문제 필드 이름 — 섹션 전체 미설정이면 "config"
                   (Offending field, or "config" for a missing section)
        severity: 심각도 (warning for fields, error for missing sections)
    """

    type: IncompleteSettingType
    field_key: str
    severity: Severity


class SettingsCompletenessResult(BaseModel):
    is_complete: bool
    completion_percentage: int
    incomplete_settings: list[IncompleteSetting]


class SettingsCompletenessRequest(BaseModel):
    settings: CompanySettings | None = None
    work_mode_config: WorkModeConfig | None = None


class SettingsCompletenessResponse(SettingsCompletenessResult):
    """완성도 검사 응답 — 배지를 표시할 탭 목록 포함 (Includes tabs to badge)."""

    incomplete_tabs: list[IncompleteSettingType]
