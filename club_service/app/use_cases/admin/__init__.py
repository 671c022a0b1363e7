"""
Admin Use Cases
"""

from .dtos import ActivityLogResponse, DashboardResponse
from .get_activity_log_use_case import GetActivityLogUseCase
from .get_dashboard_use_case import GetDashboardUseCase

__all__ = [
    "GetDashboardUseCase",
    "GetActivityLogUseCase",
    "DashboardResponse",
    "ActivityLogResponse",
]
