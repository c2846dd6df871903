"""휴게 시간 검증 관련 Pydantic 스키마 정의.

Break validation Pydantic schema definitions.
Covers configured break periods (schedule forms), recorded break records
(attendance days), and the tagged validation results returned by the
break validation services.
"""

from typing import Literal

from pydantic import BaseModel, Field

from hr_rules.schemas.enums import BreakErrorCode


# === 휴게 구간 (Break period) ===

class BreakPeriodInput(BaseModel):
    """휴게 구간 입력 스키마 — 검증 호출마다 생성되는 임시 값.

    Break period as edited in a schedule form.

    Attributes:
        name: 휴게 이름 (Display name, e.g. "Lunch")
        start_time: 시작 시각 "HH:MM" (Start time)
        end_time: 종료 시각 "HH:MM" (End time)
        is_flexible: 유연 휴게 여부 (Whether the employee may shift it)
    """

    name: str = ""
    start_time: str
    end_time: str
    is_flexible: bool = False


# === 검증 결과 (Validation results) ===

class ValidResult(BaseModel):
    """검증 성공 결과 (Successful validation)."""

    is_valid: Literal[True] = True


class InvalidResult(BaseModel):
    """검증 실패 결과 — 기계 판독용 오류 코드 포함.

    Failed validation carrying a stable machine-readable error code.
    Translating the code into a localized message is the caller's job.
    """

    is_valid: Literal[False] = False
    error_code: BreakErrorCode


# 휴게 검증 결과 태그 유니온 (Tagged union of break validation results)
BreakValidationResult = ValidResult | InvalidResult


class BreakPeriodError(BaseModel):
    """여러 휴게 구간 검증 시 발견된 개별 오류.

    A single failure found while validating a list of break periods.

    Attributes:
        period_index: 오류가 발생한 구간 인덱스 (Index of the failing period)
        other_index: 겹침 오류일 때 상대 구간 인덱스 (Second period of an overlap)
        error_code: 오류 코드 (Error code)
    """

    period_index: int
    other_index: int | None = None
    error_code: BreakErrorCode


# === 휴게 기록 (Recorded breaks) ===

class BreakRecord(BaseModel):
    """근태 기록에 포함된 실제 휴게 기록.

    A recorded break inside one attendance day.
    break_start / break_end accept "HH:MM" or ISO datetimes;
    a break still in progress has no break_end.
    """

    id: int
    break_number: int
    attendance_record_id: int | None = None
    employee_id: int | None = None
    work_date: str | None = None
    break_start: str | None = None
    break_end: str | None = None
    actual_break_minutes: int | None = None
    effective_break_minutes: int | None = None
    notes: str | None = None


# === API 요청/응답 (API request/response) ===

class BreakValidationRequest(BaseModel):
    """휴게 구간 일괄 검증 요청 (Validate all break periods of a schedule)."""

    periods: list[BreakPeriodInput] = Field(default_factory=list)
    work_start: str
    work_end: str
    overnight: bool = False


class BreakValidationResponse(BaseModel):
    """휴게 구간 일괄 검증 응답.

    Attributes:
        is_valid: 오류가 하나도 없는지 (True when errors is empty)
        errors: 발견된 모든 오류 (All failures, within-hours first then overlaps)
        total_break_minutes: 휴게 시간 합계 (Sum of period durations)
    """

    is_valid: bool
    errors: list[BreakPeriodError]
    total_break_minutes: int


class BreakWithinHoursRequest(BaseModel):
    """단일 휴게 구간의 근무시간 포함 여부 검증 요청."""

    break_start: str
    break_end: str
    work_start: str
    work_end: str
    overnight: bool = False


class BreakRecordCheckRequest(BaseModel):
    """휴게 기록 점검 요청 (Check the recorded breaks of one attendance day)."""

    records: list[BreakRecord] = Field(default_factory=list)
    max_breaks_per_day: int = Field(ge=0)


class BreakRecordCheckResponse(BaseModel):
    """휴게 기록 점검 응답.

    Attributes:
        is_ordered: break_number 비감소 여부 (Break numbers never decrease)
        is_sequential: break_number가 1..N 인지 (Numbers are exactly 1..N)
        has_overlap: 완료된 휴게끼리 겹침 여부 (Completed breaks overlap)
        overlapping_pairs: 겹치는 휴게 ID 쌍 (IDs of overlapping pairs)
        is_within_max: 일일 최대 횟수 이내 여부 (Count within daily maximum)
        can_add_break: 휴게 추가 가능 여부 (Another break may be started)
    """

    is_ordered: bool
    is_sequential: bool
    has_overlap: bool
    overlapping_pairs: list[tuple[int, int]]
    is_within_max: bool
    can_add_break: bool
