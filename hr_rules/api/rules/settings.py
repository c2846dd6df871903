"""회사 설정 완성도 라우터 — 설정 탭 배지 표시용.

Settings completeness router — Tells the settings UI which tabs to badge.
"""

from fastapi import APIRouter

from hr_rules.schemas.settings import SettingsCompletenessRequest, SettingsCompletenessResponse
from hr_rules.services.settings_completeness_service import settings_completeness_service

router: APIRouter = APIRouter()


@router.post("/completeness", response_model=SettingsCompletenessResponse)
async def check_settings_completeness(data: SettingsCompletenessRequest) -> SettingsCompletenessResponse:
    result = settings_completeness_service.check_settings_completeness(
        data.settings, data.work_mode_config,
    )
    return SettingsCompletenessResponse(
        **result.model_dump(),
        incomplete_tabs=settings_completeness_service.get_incomplete_tab_types(result),
    )
