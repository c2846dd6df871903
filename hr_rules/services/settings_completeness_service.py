"""설정 완성도 검사 서비스 — 회사 설정 탭별 누락/범위 오류 탐지.

Settings Completeness Service — Walks the company settings tree and reports
every required field that is missing or out of its valid range.

Each settings section has an independent checker `(config) -> SectionReport`.
Reports are concatenated in tab order: workMode, attendance, payroll,
overtime, break, allowance, deduction. A section that is not configured at
all yields a single "config" entry with severity "error" and counts all of
its fixed checks as failed.

completion_percentage = round(passed checks / total checks * 100).
"""

import math
from typing import Callable, NamedTuple

from pydantic import BaseModel

from hr_rules.schemas.enums import IncompleteSettingType, Severity, WorkMode
from hr_rules.schemas.settings import (
    AllowanceConfig,
    AttendanceConfig,
    BreakConfig,
    CompanySettings,
    DeductionConfig,
    IncompleteSetting,
    OvertimeConfig,
    PayrollConfig,
    SettingsCompletenessResult,
    WorkModeConfig,
)
from hr_rules.utils.time_utils import is_valid_time_string, parse_time_to_minutes

# 섹션 미설정 시 사용하는 필드 키 (Field key used when a whole section is missing)
MISSING_SECTION_KEY: str = "config"

# 초과근무 할증률 필드: 모두 1.0 이상 (Overtime multipliers, all >= 1.0)
OVERTIME_RATE_FIELDS: tuple[str, ...] = (
    "regular_overtime_rate",
    "night_work_rate",
    "night_overtime_rate",
    "holiday_overtime_rate",
    "holiday_night_overtime_rate",
)


class SectionReport(NamedTuple):
    """섹션 검사 결과 — 실행한 검사 수와 발견된 항목."""

    checks_total: int
    issues: list[IncompleteSetting]


# ---------------------------------------------------------------------------
# 값 판정 헬퍼: Value predicates
# ---------------------------------------------------------------------------

def _is_int_in(value: object, minimum: int, maximum: int | None = None) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value >= minimum and (maximum is None or value <= maximum)


def _is_number_in(value: object, minimum: float, maximum: float | None = None) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if math.isnan(value):
        return False
    return value >= minimum and (maximum is None or value <= maximum)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class _SectionChecker:
    """한 섹션의 필드 검사를 누적합니다 (Accumulates field checks for one section)."""

    def __init__(self, section: IncompleteSettingType) -> None:
        self.section = section
        self.checks_total: int = 0
        self.issues: list[IncompleteSetting] = []

    def require(self, field_key: str, passed: bool) -> None:
        self.checks_total += 1
        if not passed:
            self.issues.append(
                IncompleteSetting(type=self.section, field_key=field_key, severity=Severity.WARNING)
            )

    def report(self) -> SectionReport:
        return SectionReport(self.checks_total, self.issues)


# ---------------------------------------------------------------------------
# 섹션별 검사: Per-section checkers
# ---------------------------------------------------------------------------

def check_work_mode(config: WorkModeConfig) -> SectionReport:
    """근무 방식 — FIXED_HOURS 일 때만 기본 출퇴근 시각 필수.

    Default hours are required for FIXED_HOURS only; FLEXIBLE_SHIFT never
    reports them even when they are None.
    """
    checker = _SectionChecker(IncompleteSettingType.WORK_MODE)
    checker.require("mode", config.mode is not None)
    fixed_hours: bool = config.mode == WorkMode.FIXED_HOURS
    checker.require(
        "default_work_start_time",
        not fixed_hours or is_valid_time_string(config.default_work_start_time),
    )
    checker.require(
        "default_work_end_time",
        not fixed_hours or is_valid_time_string(config.default_work_end_time),
    )
    checker.require(
        "default_break_minutes",
        config.default_break_minutes is None or _is_int_in(config.default_break_minutes, 0),
    )
    return checker.report()


def check_attendance(config: AttendanceConfig) -> SectionReport:
    checker = _SectionChecker(IncompleteSettingType.ATTENDANCE)
    checker.require("default_work_start_time", is_valid_time_string(config.default_work_start_time))
    checker.require("default_work_end_time", is_valid_time_string(config.default_work_end_time))
    checker.require("default_break_minutes", _is_int_in(config.default_break_minutes, 0))
    checker.require("late_grace_minutes", _is_int_in(config.late_grace_minutes, 0, 60))
    checker.require("early_leave_grace_minutes", _is_int_in(config.early_leave_grace_minutes, 0, 60))
    # 위치 확인을 켠 경우에만 반경 필수 (Radius only required with geo-location on)
    checker.require(
        "geo_fence_radius_meters",
        not config.require_geo_location or _is_int_in(config.geo_fence_radius_meters, 0),
    )
    return checker.report()


def check_payroll(config: PayrollConfig) -> SectionReport:
    checker = _SectionChecker(IncompleteSettingType.PAYROLL)
    checker.require("pay_day", _is_int_in(config.pay_day, 1, 31))
    checker.require("cutoff_day", _is_int_in(config.cutoff_day, 1, 31))
    checker.require(
        "standard_working_days_per_month",
        _is_int_in(config.standard_working_days_per_month, 1, 31),
    )
    checker.require(
        "standard_working_hours_per_day",
        _is_int_in(config.standard_working_hours_per_day, 1, 24),
    )
    return checker.report()


def check_overtime(config: OvertimeConfig) -> SectionReport:
    checker = _SectionChecker(IncompleteSettingType.OVERTIME)
    for field_key in OVERTIME_RATE_FIELDS:
        checker.require(field_key, _is_number_in(getattr(config, field_key), 1.0))
    checker.require("night_start_time", is_valid_time_string(config.night_start_time))
    checker.require("night_end_time", is_valid_time_string(config.night_end_time))
    checker.require("standard_working_hours", _is_int_in(config.standard_working_hours, 1, 24))
    checker.require("max_overtime_hours_per_day", _is_int_in(config.max_overtime_hours_per_day, 0, 24))
    checker.require("max_overtime_hours_per_month", _is_int_in(config.max_overtime_hours_per_month, 0))
    return checker.report()


def check_break(config: BreakConfig) -> SectionReport:
    checker = _SectionChecker(IncompleteSettingType.BREAK)
    checker.require("default_break_minutes", _is_int_in(config.default_break_minutes, 0))
    checker.require("minimum_break_minutes", _is_int_in(config.minimum_break_minutes, 0))
    maximum_ok: bool = _is_int_in(config.maximum_break_minutes, 0)
    if maximum_ok and _is_int_in(config.minimum_break_minutes, 0):
        maximum_ok = config.minimum_break_minutes <= config.maximum_break_minutes
    checker.require("maximum_break_minutes", maximum_ok)
    checker.require("max_breaks_per_day", _is_int_in(config.max_breaks_per_day, 1))
    checker.require("night_shift_start_time", is_valid_time_string(config.night_shift_start_time))
    checker.require("night_shift_end_time", is_valid_time_string(config.night_shift_end_time))
    checker.require(
        "night_shift_minimum_break_minutes",
        _is_int_in(config.night_shift_minimum_break_minutes, 0),
    )
    checker.require(
        "night_shift_default_break_minutes",
        _is_int_in(config.night_shift_default_break_minutes, 0),
    )
    for index, period in enumerate(config.fixed_break_periods):
        start: int | None = parse_time_to_minutes(period.start_time)
        end: int | None = parse_time_to_minutes(period.end_time)
        checker.require(
            f"fixed_break_periods[{index}]",
            start is not None and end is not None and start != end,
        )
    return checker.report()


def check_allowance(config: AllowanceConfig) -> SectionReport:
    """수당 — 규칙이 없어도 완성, 있는 규칙은 code/name/amount 필수."""
    checker = _SectionChecker(IncompleteSettingType.ALLOWANCE)
    for index, rule in enumerate(config.allowances):
        checker.require(f"allowances[{index}].code", not _is_blank(rule.code))
        checker.require(f"allowances[{index}].name", not _is_blank(rule.name))
        checker.require(f"allowances[{index}].amount", _is_number_in(rule.amount, 0))
    return checker.report()


def check_deduction(config: DeductionConfig) -> SectionReport:
    checker = _SectionChecker(IncompleteSettingType.DEDUCTION)
    checker.require(
        "late_penalty_per_minute",
        _is_number_in(config.late_penalty_per_minute, 0)
        or (config.late_penalty_per_minute is None and not config.enable_late_penalty),
    )
    checker.require(
        "early_leave_penalty_per_minute",
        _is_number_in(config.early_leave_penalty_per_minute, 0)
        or (config.early_leave_penalty_per_minute is None and not config.enable_early_leave_penalty),
    )
    for index, rule in enumerate(config.deductions):
        checker.require(f"deductions[{index}].code", not _is_blank(rule.code))
        checker.require(f"deductions[{index}].name", not _is_blank(rule.name))
        checker.require(
            f"deductions[{index}].percentage",
            rule.percentage is None or _is_number_in(rule.percentage, 0, 100),
        )
        checker.require(
            f"deductions[{index}].amount",
            rule.amount is None or _is_number_in(rule.amount, 0),
        )
    return checker.report()


class _Section(NamedTuple):
    """CompanySettings 섹션 등록 정보 (Registered CompanySettings section)."""

    type: IncompleteSettingType
    attribute: str
    blank: Callable[[], BaseModel]
    check: Callable[[BaseModel], SectionReport]


# 탭 순서대로 등록 (Registered in tab order)
SECTIONS: tuple[_Section, ...] = (
    _Section(IncompleteSettingType.ATTENDANCE, "attendance_config", AttendanceConfig, check_attendance),
    _Section(IncompleteSettingType.PAYROLL, "payroll_config", PayrollConfig, check_payroll),
    _Section(IncompleteSettingType.OVERTIME, "overtime_config", OvertimeConfig, check_overtime),
    _Section(IncompleteSettingType.BREAK, "break_config", BreakConfig, check_break),
    _Section(IncompleteSettingType.ALLOWANCE, "allowance_config", AllowanceConfig, check_allowance),
    _Section(IncompleteSettingType.DEDUCTION, "deduction_config", DeductionConfig, check_deduction),
)


def _missing_section(
    section_type: IncompleteSettingType,
    fixed_checks: int,
    field_key: str = MISSING_SECTION_KEY,
) -> SectionReport:
    """미설정 섹션 — 고정 검사 전부 실패로 계산 (All fixed checks count as failed)."""
    issue = IncompleteSetting(type=section_type, field_key=field_key, severity=Severity.ERROR)
    return SectionReport(fixed_checks, [issue])


class SettingsCompletenessService:
    """설정 완성도 검사 서비스.

    Settings completeness service used to badge incomplete settings tabs.
    Stateless: identical inputs always give identical results.
    """

    def check_settings_completeness(
        self,
        settings: CompanySettings | None,
        work_mode_config: WorkModeConfig | None,
    ) -> SettingsCompletenessResult:
        """회사 설정 전체의 완성도를 검사합니다.

        Check every settings section and aggregate the findings.

        Args:
            settings: 회사 설정 트리, 미설정이면 None (Company settings or None)
            work_mode_config: 근무 방식 설정, 미설정이면 None (Work mode config or None)

        Returns:
            SettingsCompletenessResult: 완성 여부, 완성도(0~100), 미완성 항목 목록
        """
        reports: list[SectionReport] = []

        if work_mode_config is None:
            # 근무 방식 미설정은 "mode" 항목으로 보고 (Missing work mode is reported on "mode")
            blank_work_mode = WorkModeConfig(mode=WorkMode.FIXED_HOURS)
            reports.append(
                _missing_section(
                    IncompleteSettingType.WORK_MODE,
                    check_work_mode(blank_work_mode).checks_total,
                    field_key="mode",
                )
            )
        else:
            reports.append(check_work_mode(work_mode_config))

        for section in SECTIONS:
            config: BaseModel | None = getattr(settings, section.attribute) if settings is not None else None
            if config is None:
                fixed_checks: int = section.check(section.blank()).checks_total
                reports.append(_missing_section(section.type, fixed_checks))
            else:
                reports.append(section.check(config))

        incomplete: list[IncompleteSetting] = [issue for report in reports for issue in report.issues]
        checks_total: int = sum(report.checks_total for report in reports)
        failed: int = sum(
            report.checks_total if self._is_missing(report) else len(report.issues)
            for report in reports
        )
        passed: int = max(checks_total - failed, 0)
        completion: int = round(passed / checks_total * 100) if checks_total else 100

        return SettingsCompletenessResult(
            is_complete=len(incomplete) == 0,
            completion_percentage=min(max(completion, 0), 100),
            incomplete_settings=incomplete,
        )

    @staticmethod
    def _is_missing(report: SectionReport) -> bool:
        return any(issue.severity == Severity.ERROR for issue in report.issues)

    def has_incomplete_settings(
        self,
        tab_type: IncompleteSettingType,
        result: SettingsCompletenessResult,
    ) -> bool:
        """해당 탭에 미완성 항목이 하나라도 있으면 True."""
        return any(setting.type == tab_type for setting in result.incomplete_settings)

    def get_incomplete_tab_types(
        self, result: SettingsCompletenessResult
    ) -> list[IncompleteSettingType]:
        """미완성 항목이 있는 탭 목록 — 중복 없이 처음 등장한 순서대로."""
        return list(dict.fromkeys(setting.type for setting in result.incomplete_settings))


settings_completeness_service: SettingsCompletenessService = SettingsCompletenessService()
