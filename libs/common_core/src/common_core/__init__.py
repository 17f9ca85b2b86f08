"""
ClockRelay Common Core Package.
"""

from .config_enums import Environment, ServiceName
from .error_enums import ErrorCode
from .error_models import ErrorDetail
from .time_models import ErrorResult, HealthStatus, TimeResult, TimeSource, utc_now_rfc3339

__all__ = [
    "Environment",
    "ErrorCode",
    "ErrorDetail",
    "ErrorResult",
    "HealthStatus",
    "ServiceName",
    "TimeResult",
    "TimeSource",
    "utc_now_rfc3339",
]
