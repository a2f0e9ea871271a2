from fastapi import APIRouter

from flashdeck.config import get_settings
from flashdeck.feature_flags import get_feature_flags
from flashdeck.infrastructure.common.schemas.settings_schemas import AppSettingsResponse

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
async def get_app_settings() -> AppSettingsResponse:
    """Public, caller-independent settings: server flags and the free-plan deck limit."""
    return AppSettingsResponse(
        feature_flags=get_feature_flags(),
        free_plan_deck_limit=get_settings().FREE_PLAN_DECK_LIMIT,
    )
