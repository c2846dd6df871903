"""설정 완성도 검사 서비스 테스트.

Settings completeness tests — null trees, per-section field keys,
the work-mode conditional requirement and the completion percentage.
"""

import pytest

from hr_rules.schemas.enums import IncompleteSettingType, Severity, WorkMode
from hr_rules.schemas.settings import (
    AllowanceRule,
    BreakPeriodConfig,
    CompanySettings,
    DeductionRule,
    WorkModeConfig,
)
from hr_rules.services.settings_completeness_service import settings_completeness_service as svc


def _keys(result, section: IncompleteSettingType) -> list[str]:
    return [s.field_key for s in result.incomplete_settings if s.type == section]


WORK_MODE_CASES = [
    None,
    WorkModeConfig(mode=WorkMode.FIXED_HOURS),
    WorkModeConfig(mode=WorkMode.FLEXIBLE_SHIFT),
    WorkModeConfig(mode=WorkMode.FIXED_HOURS, default_work_start_time="09:00", default_work_end_time="18:00"),
]


class TestNullSettings:
    """설정 미존재 테스트."""

    @pytest.mark.parametrize("work_mode", WORK_MODE_CASES)
    def test_null_settings_never_complete(self, work_mode):
        """settings=None 이면 항상 미완성."""
        result = svc.check_settings_completeness(None, work_mode)
        assert result.is_complete is False
        assert len(result.incomplete_settings) > 0

    def test_every_section_reported_separately(self, fixed_hours_work_mode):
        result = svc.check_settings_completeness(None, fixed_hours_work_mode)
        assert [(s.type, s.field_key, s.severity) for s in result.incomplete_settings] == [
            (IncompleteSettingType.ATTENDANCE, "config", Severity.ERROR),
            (IncompleteSettingType.PAYROLL, "config", Severity.ERROR),
            (IncompleteSettingType.OVERTIME, "config", Severity.ERROR),
            (IncompleteSettingType.BREAK, "config", Severity.ERROR),
            (IncompleteSettingType.ALLOWANCE, "config", Severity.ERROR),
            (IncompleteSettingType.DEDUCTION, "config", Severity.ERROR),
        ]

    def test_all_null_is_zero_percent(self):
        result = svc.check_settings_completeness(None, None)
        assert result.completion_percentage == 0
        assert result.incomplete_settings[0].type == IncompleteSettingType.WORK_MODE
        assert result.incomplete_settings[0].field_key == "mode"
        assert result.incomplete_settings[0].severity == Severity.ERROR

    def test_missing_sub_config(self, complete_settings, fixed_hours_work_mode):
        """하위 설정 하나만 없으면 해당 섹션만 보고."""
        settings = complete_settings.model_copy(update={"overtime_config": None})
        result = svc.check_settings_completeness(settings, fixed_hours_work_mode)
        assert [(s.type, s.field_key) for s in result.incomplete_settings] == [
            (IncompleteSettingType.OVERTIME, "config"),
        ]
        assert 0 < result.completion_percentage < 100


class TestCompleteSettings:
    """완성된 설정 테스트."""

    def test_complete_settings(self, complete_settings, fixed_hours_work_mode):
        result = svc.check_settings_completeness(complete_settings, fixed_hours_work_mode)
        assert result.is_complete is True
        assert result.completion_percentage == 100
        assert result.incomplete_settings == []

    def test_idempotent(self, complete_settings):
        """같은 입력이면 같은 결과."""
        settings = complete_settings.model_copy(update={"payroll_config": None})
        first = svc.check_settings_completeness(settings, None)
        second = svc.check_settings_completeness(settings, None)
        assert first == second

    def test_input_not_mutated(self, complete_settings, fixed_hours_work_mode):
        snapshot = complete_settings.model_dump()
        svc.check_settings_completeness(complete_settings, fixed_hours_work_mode)
        assert complete_settings.model_dump() == snapshot

    @pytest.mark.parametrize("work_mode", WORK_MODE_CASES)
    @pytest.mark.parametrize("settings", [None, CompanySettings(), "complete"])
    def test_percentage_bounds(self, settings, work_mode, complete_settings):
        if settings == "complete":
            settings = complete_settings
        result = svc.check_settings_completeness(settings, work_mode)
        assert 0 <= result.completion_percentage <= 100


class TestWorkMode:
    """근무 방식 조건부 필수 항목 테스트."""

    def test_fixed_hours_requires_default_hours(self, complete_settings):
        result = svc.check_settings_completeness(complete_settings, WorkModeConfig(mode=WorkMode.FIXED_HOURS))
        assert _keys(result, IncompleteSettingType.WORK_MODE) == [
            "default_work_start_time",
            "default_work_end_time",
        ]
        assert all(s.severity == Severity.WARNING for s in result.incomplete_settings)

    def test_flexible_shift_does_not_require_default_hours(self, complete_settings):
        result = svc.check_settings_completeness(complete_settings, WorkModeConfig(mode=WorkMode.FLEXIBLE_SHIFT))
        assert _keys(result, IncompleteSettingType.WORK_MODE) == []
        assert result.is_complete is True

    def test_fixed_hours_rejects_malformed_time(self, complete_settings):
        work_mode = WorkModeConfig(
            mode=WorkMode.FIXED_HOURS, default_work_start_time="9:00", default_work_end_time="18:00",
        )
        result = svc.check_settings_completeness(complete_settings, work_mode)
        assert _keys(result, IncompleteSettingType.WORK_MODE) == ["default_work_start_time"]

    def test_negative_break_minutes(self, complete_settings):
        work_mode = WorkModeConfig(mode=WorkMode.FLEXIBLE_SHIFT, default_break_minutes=-1)
        result = svc.check_settings_completeness(complete_settings, work_mode)
        assert _keys(result, IncompleteSettingType.WORK_MODE) == ["default_break_minutes"]


class TestSections:
    """섹션별 필드 검사 테스트."""

    @pytest.mark.parametrize("pay_day", [0, 32, -5, None])
    def test_pay_day_out_of_range(self, complete_settings, fixed_hours_work_mode, pay_day):
        settings = complete_settings.model_copy(deep=True)
        settings.payroll_config.pay_day = pay_day
        result = svc.check_settings_completeness(settings, fixed_hours_work_mode)
        assert _keys(result, IncompleteSettingType.PAYROLL) == ["pay_day"]
        assert result.is_complete is False

    @pytest.mark.parametrize("cutoff_day", [1, 15, 31])
    def test_cutoff_day_in_range(self, complete_settings, fixed_hours_work_mode, cutoff_day):
        settings = complete_settings.model_copy(deep=True)
        settings.payroll_config.cutoff_day = cutoff_day
        result = svc.check_settings_completeness(settings, fixed_hours_work_mode)
        assert result.is_complete is True

    def test_attendance_fields(self, complete_settings, fixed_hours_work_mode):
        settings = complete_settings.model_copy(deep=True)
        settings.attendance_config.default_work_end_time = "24:00"
        settings.attendance_config.late_grace_minutes = 61
        settings.attendance_config.geo_fence_radius_meters = None
        result = svc.check_settings_completeness(settings, fixed_hours_work_mode)
        assert _keys(result, IncompleteSettingType.ATTENDANCE) == [
            "default_work_end_time",
            "late_grace_minutes",
            "geo_fence_radius_meters",
        ]

    def test_geo_radius_only_with_geo_location(self, complete_settings, fixed_hours_work_mode):
        settings = complete_settings.model_copy(deep=True)
        settings.attendance_config.require_geo_location = False
        settings.attendance_config.geo_fence_radius_meters = None
        result = svc.check_settings_completeness(settings, fixed_hours_work_mode)
        assert result.is_complete is True

    @pytest.mark.parametrize("rate", [0.99, 0.0, -1.25, None])
    def test_overtime_rate_below_one(self, complete_settings, fixed_hours_work_mode, rate):
        """할증률은 1.0 이상이어야 함."""
        settings = complete_settings.model_copy(deep=True)
        settings.overtime_config.night_overtime_rate = rate
        result = svc.check_settings_completeness(settings, fixed_hours_work_mode)
        assert _keys(result, IncompleteSettingType.OVERTIME) == ["night_overtime_rate"]

    def test_overtime_rate_of_exactly_one(self, complete_settings, fixed_hours_work_mode):
        settings = complete_settings.model_copy(deep=True)
        settings.overtime_config.regular_overtime_rate = 1.0
        result = svc.check_settings_completeness(settings, fixed_hours_work_mode)
        assert result.is_complete is True

    def test_break_minimum_above_maximum(self, complete_settings, fixed_hours_work_mode):
        settings = complete_settings.model_copy(deep=True)
        settings.break_config.minimum_break_minutes = 120
        result = svc.check_settings_completeness(settings, fixed_hours_work_mode)
        assert _keys(result, IncompleteSettingType.BREAK) == ["maximum_break_minutes"]

    def test_break_fixed_periods(self, complete_settings, fixed_hours_work_mode):
        settings = complete_settings.model_copy(deep=True)
        settings.break_config.fixed_break_periods.append(
            BreakPeriodConfig(name="Tea", start_time="15:00", end_time="15:00"),
        )
        settings.break_config.fixed_break_periods.append(BreakPeriodConfig(name="Night", start_time="25:00"))
        settings.break_config.max_breaks_per_day = 0
        result = svc.check_settings_completeness(settings, fixed_hours_work_mode)
        assert _keys(result, IncompleteSettingType.BREAK) == [
            "max_breaks_per_day",
            "fixed_break_periods[1]",
            "fixed_break_periods[2]",
        ]

    def test_allowance_rule_fields(self, complete_settings, fixed_hours_work_mode):
        settings = complete_settings.model_copy(deep=True)
        settings.allowance_config.allowances.append(AllowanceRule(code="  ", name="", amount=-1))
        result = svc.check_settings_completeness(settings, fixed_hours_work_mode)
        assert _keys(result, IncompleteSettingType.ALLOWANCE) == [
            "allowances[1].code",
            "allowances[1].name",
            "allowances[1].amount",
        ]

    def test_empty_allowance_list_is_complete(self, complete_settings, fixed_hours_work_mode):
        settings = complete_settings.model_copy(deep=True)
        settings.allowance_config.allowances = []
        result = svc.check_settings_completeness(settings, fixed_hours_work_mode)
        assert result.is_complete is True

    @pytest.mark.parametrize("percentage, expected", [
        (None, []),
        (0, []),
        (100, []),
        (100.5, ["deductions[0].percentage"]),
        (-0.1, ["deductions[0].percentage"]),
    ])
    def test_deduction_percentage(self, complete_settings, fixed_hours_work_mode, percentage, expected):
        settings = complete_settings.model_copy(deep=True)
        settings.deduction_config.deductions = [DeductionRule(code="TAX", name="Tax", percentage=percentage)]
        result = svc.check_settings_completeness(settings, fixed_hours_work_mode)
        assert _keys(result, IncompleteSettingType.DEDUCTION) == expected

    def test_enabled_penalty_requires_rate(self, complete_settings, fixed_hours_work_mode):
        settings = complete_settings.model_copy(deep=True)
        settings.deduction_config.enable_early_leave_penalty = True
        result = svc.check_settings_completeness(settings, fixed_hours_work_mode)
        assert _keys(result, IncompleteSettingType.DEDUCTION) == ["early_leave_penalty_per_minute"]


class TestPercentage:
    """완성도 계산 테스트."""

    def test_one_failed_field_lowers_percentage(self, complete_settings, fixed_hours_work_mode):
        settings = complete_settings.model_copy(deep=True)
        settings.payroll_config.pay_day = 32
        result = svc.check_settings_completeness(settings, fixed_hours_work_mode)
        assert result.completion_percentage == 98

    def test_only_work_mode_configured(self, fixed_hours_work_mode):
        result = svc.check_settings_completeness(None, fixed_hours_work_mode)
        assert result.completion_percentage == 12

    def test_more_missing_sections_never_raise_percentage(self, complete_settings, fixed_hours_work_mode):
        one_missing = complete_settings.model_copy(update={"break_config": None})
        two_missing = complete_settings.model_copy(update={"break_config": None, "payroll_config": None})
        first = svc.check_settings_completeness(one_missing, fixed_hours_work_mode)
        second = svc.check_settings_completeness(two_missing, fixed_hours_work_mode)
        assert second.completion_percentage < first.completion_percentage


class TestTabHelpers:
    """탭 배지 헬퍼 테스트."""

    def test_incomplete_tab_types_deduplicated(self, complete_settings):
        settings = complete_settings.model_copy(deep=True)
        settings.payroll_config.pay_day = 0
        settings.payroll_config.cutoff_day = 0
        settings.deduction_config = None
        result = svc.check_settings_completeness(settings, WorkModeConfig(mode=WorkMode.FIXED_HOURS))

        assert svc.get_incomplete_tab_types(result) == [
            IncompleteSettingType.WORK_MODE,
            IncompleteSettingType.PAYROLL,
            IncompleteSettingType.DEDUCTION,
        ]

    def test_has_incomplete_settings(self, complete_settings, fixed_hours_work_mode):
        settings = complete_settings.model_copy(update={"allowance_config": None})
        result = svc.check_settings_completeness(settings, fixed_hours_work_mode)
        assert svc.has_incomplete_settings(IncompleteSettingType.ALLOWANCE, result) is True
        assert svc.has_incomplete_settings(IncompleteSettingType.PAYROLL, result) is False

    def test_complete_result_has_no_tabs(self, complete_settings, fixed_hours_work_mode):
        result = svc.check_settings_completeness(complete_settings, fixed_hours_work_mode)
        assert svc.get_incomplete_tab_types(result) == []
