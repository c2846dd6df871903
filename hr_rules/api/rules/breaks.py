"""휴게 시간 검증 라우터 — 스케줄/근태 폼에서 호출.

Break validation router — Called by schedule forms and attendance screens.
Returns machine-readable error codes; localized messages are the client's job.
"""

from fastapi import APIRouter

from hr_rules.schemas.break_period import (
    BreakRecordCheckRequest,
    BreakRecordCheckResponse,
    BreakValidationRequest,
    BreakValidationResponse,
    BreakValidationResult,
    BreakWithinHoursRequest,
)
from hr_rules.services.break_record_service import break_record_service
from hr_rules.services.break_validation_service import break_validation_service
from hr_rules.utils.exceptions import BadRequestError
from hr_rules.utils.time_utils import is_valid_time_string

router: APIRouter = APIRouter()


@router.post("/validate", response_model=BreakValidationResponse)
async def validate_break_periods(data: BreakValidationRequest) -> BreakValidationResponse:
    """스케줄의 모든 휴게 구간을 검증합니다 (Validate all break periods of a schedule)."""
    # 근무시간 자체가 잘못되면 구간별 오류가 무의미: Work hours must parse first
    if not is_valid_time_string(data.work_start) or not is_valid_time_string(data.work_end):
        raise BadRequestError("work_start and work_end must be HH:MM times")

    errors = break_validation_service.validate_all_break_periods(
        data.periods, data.work_start, data.work_end, data.overnight,
    )
    total = break_validation_service.calculate_break_duration(
        data.periods, data.overnight, work_start=data.work_start,
    )
    return BreakValidationResponse(is_valid=not errors, errors=errors, total_break_minutes=total)


@router.post("/within-work-hours", response_model=BreakValidationResult)
async def validate_break_within_work_hours(data: BreakWithinHoursRequest) -> BreakValidationResult:
    return break_validation_service.validate_break_within_work_hours(
        data.break_start, data.break_end, data.work_start, data.work_end, data.overnight,
    )


@router.post("/records/check", response_model=BreakRecordCheckResponse)
async def check_break_records(data: BreakRecordCheckRequest) -> BreakRecordCheckResponse:
    """하루치 휴게 기록을 점검합니다 (Check the recorded breaks of one attendance day)."""
    overlaps = break_record_service.find_overlapping_breaks(data.records)
    return BreakRecordCheckResponse(
        is_ordered=break_record_service.is_break_timeline_ordered(data.records),
        is_sequential=break_record_service.is_break_number_sequential(data.records),
        has_overlap=len(overlaps) > 0,
        overlapping_pairs=[(first.id, second.id) for first, second in overlaps],
        is_within_max=break_record_service.is_within_max_breaks(data.records, data.max_breaks_per_day),
        can_add_break=break_record_service.can_add_new_break(len(data.records), data.max_breaks_per_day),
    )
