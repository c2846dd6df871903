"""휴게 구간 검증 서비스 — 스케줄 폼의 휴게 설정 검증 로직.

Break Period Validation Service — Validation rules for configured break periods.
Checks that a break lies within work hours, that two breaks do not overlap,
and aggregates break durations. Overnight schedules are handled by projecting
every time onto one 48-hour timeline (see hr_rules.utils.time_utils).

All methods are pure: invalid input produces an InvalidResult, never an exception.
"""

from itertools import combinations
from typing import Sequence

from hr_rules.schemas.break_period import (
    BreakPeriodError,
    BreakPeriodInput,
    BreakValidationResult,
    InvalidResult,
    ValidResult,
)
from hr_rules.schemas.enums import BreakErrorCode
from hr_rules.utils.time_utils import (
    MINUTES_PER_DAY,
    normalize_range,
    normalize_work_interval,
    parse_time_to_minutes,
    ranges_overlap,
)


class BreakValidationService:
    """휴게 구간 검증 서비스.

    Break period validation service used by schedule and settings forms.
    """

    @staticmethod
    def _parse_range(start: str, end: str) -> tuple[int, int] | None:
        """두 시각 문자열을 파싱합니다. 하나라도 잘못되면 None."""
        start_min: int | None = parse_time_to_minutes(start)
        end_min: int | None = parse_time_to_minutes(end)
        if start_min is None or end_min is None:
            return None
        return start_min, end_min

    def validate_break_within_work_hours(
        self,
        break_start: str,
        break_end: str,
        work_start: str,
        work_end: str,
        overnight: bool,
    ) -> BreakValidationResult:
        """휴게 구간이 근무시간 안에 있는지 검증합니다.

        Validate that a break period lies within the work interval.

        Args:
            break_start: 휴게 시작 "HH:MM" (Break start)
            break_end: 휴게 종료 "HH:MM" (Break end)
            work_start: 근무 시작 "HH:MM" (Work start)
            work_end: 근무 종료 "HH:MM" (Work end)
            overnight: 근무가 자정을 넘는지 (Work interval crosses midnight)

        Returns:
            BreakValidationResult: ValidResult 또는 오류 코드가 담긴 InvalidResult
                - INVALID_TIME_FORMAT: 시각 형식 오류 (Any time string malformed)
                - BREAK_START_AFTER_END: 시작 >= 종료 (Start not before end)
                - BREAK_OUTSIDE_WORK_HOURS: 근무시간 밖 (Not contained in work hours)
        """
        break_range = self._parse_range(break_start, break_end)
        work_range = self._parse_range(work_start, work_end)
        if break_range is None or work_range is None:
            return InvalidResult(error_code=BreakErrorCode.INVALID_TIME_FORMAT)

        work_start_min, work_end_min = normalize_work_interval(*work_range, overnight)
        start_min, end_min = normalize_range(*break_range, overnight, anchor=work_start_min)

        if start_min >= end_min:
            return InvalidResult(error_code=BreakErrorCode.BREAK_START_AFTER_END)

        if work_start_min <= start_min and end_min <= work_end_min:
            return ValidResult()
        return InvalidResult(error_code=BreakErrorCode.BREAK_OUTSIDE_WORK_HOURS)

    def validate_break_periods_no_overlap(
        self,
        break1_start: str,
        break1_end: str,
        break2_start: str,
        break2_end: str,
        overnight: bool,
        work_start: str | None = None,
    ) -> BreakValidationResult:
        """두 휴게 구간이 겹치지 않는지 검증합니다.

        Validate that two break periods do not overlap.
        Touching endpoints (break1 ends exactly when break2 starts) are allowed.

        Args:
            break1_start, break1_end: 첫 번째 휴게 (First break)
            break2_start, break2_end: 두 번째 휴게 (Second break)
            overnight: 야간 근무 여부 (Schedule crosses midnight)
            work_start: 근무 시작 — 주어지면 타임라인 기준점으로 사용
                        (Optional work start used as the timeline anchor)

        Returns:
            BreakValidationResult: 겹치면 BREAK_PERIODS_OVERLAP
        """
        range1 = self._parse_range(break1_start, break1_end)
        range2 = self._parse_range(break2_start, break2_end)
        if range1 is None or range2 is None:
            return InvalidResult(error_code=BreakErrorCode.INVALID_TIME_FORMAT)

        anchor: int | None = None
        if work_start is not None:
            anchor = parse_time_to_minutes(work_start)
            if anchor is None:
                return InvalidResult(error_code=BreakErrorCode.INVALID_TIME_FORMAT)

        first = normalize_range(*range1, overnight, anchor=anchor)
        second = normalize_range(*range2, overnight, anchor=anchor)

        if self._overlaps(first, second, overnight and anchor is None):
            return InvalidResult(error_code=BreakErrorCode.BREAK_PERIODS_OVERLAP)
        return ValidResult()

    @staticmethod
    def _overlaps(
        first: tuple[int, int],
        second: tuple[int, int],
        compare_adjacent_days: bool,
    ) -> bool:
        if ranges_overlap(first, second):
            return True
        if not compare_adjacent_days:
            return False
        # 기준점 없는 야간 구간: 하루 차이로도 비교 (Unanchored: also compare one day apart)
        for offset in (-MINUTES_PER_DAY, MINUTES_PER_DAY):
            if ranges_overlap(first, (second[0] + offset, second[1] + offset)):
                return True
        return False

    def calculate_break_duration(
        self,
        periods: Sequence[BreakPeriodInput],
        overnight: bool,
        work_start: str | None = None,
    ) -> int:
        """휴게 구간 길이의 합계(분)를 계산합니다.

        Sum the normalized durations of all periods, in minutes.
        Overlaps are not removed; call the overlap check first when that matters.
        Periods with malformed times, or whose normalized end is not after
        their start, contribute nothing.
        """
        anchor: int | None = parse_time_to_minutes(work_start) if work_start else None
        total: int = 0
        for period in periods:
            parsed = self._parse_range(period.start_time, period.end_time)
            if parsed is None:
                continue
            start_min, end_min = normalize_range(*parsed, overnight, anchor=anchor)
            if end_min <= start_min:
                continue
            total += end_min - start_min
        return total

    def validate_all_break_periods(
        self,
        periods: Sequence[BreakPeriodInput],
        work_start: str,
        work_end: str,
        overnight: bool,
    ) -> list[BreakPeriodError]:
        """모든 휴게 구간을 검증하고 발견된 오류를 모두 반환합니다.

        Validate every period against work hours, then every unordered pair
        for overlap. Errors are returned in a deterministic order: all
        within-hours failures in list order, then overlap failures in
        (i, j) pair order. An empty list means the configuration is valid.
        """
        errors: list[BreakPeriodError] = []
        comparable: list[int] = []

        for index, period in enumerate(periods):
            result = self.validate_break_within_work_hours(
                period.start_time, period.end_time, work_start, work_end, overnight,
            )
            if isinstance(result, InvalidResult):
                errors.append(BreakPeriodError(period_index=index, error_code=result.error_code))
            # 시각이 정상이고 순서가 맞는 구간만 겹침 비교 대상
            # Only well-formed, ordered periods take part in the overlap check
            if not isinstance(result, InvalidResult) or result.error_code == BreakErrorCode.BREAK_OUTSIDE_WORK_HOURS:
                comparable.append(index)

        for i, j in combinations(comparable, 2):
            result = self.validate_break_periods_no_overlap(
                periods[i].start_time,
                periods[i].end_time,
                periods[j].start_time,
                periods[j].end_time,
                overnight,
                work_start=work_start,
            )
            if isinstance(result, InvalidResult):
                errors.append(
                    BreakPeriodError(period_index=i, other_index=j, error_code=result.error_code)
                )

        return errors


break_validation_service: BreakValidationService = BreakValidationService()
