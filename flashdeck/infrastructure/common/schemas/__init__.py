from .action_response import ActionErrorResponse
from .settings_schemas import AppSettingsResponse

__all__ = ["ActionErrorResponse", "AppSettingsResponse"]
