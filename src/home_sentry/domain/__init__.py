"""Home Sentry Domain Models"""

from .enums import (
    AlarmStatus,
    ArmingStatus,
    SensorType,
)

from .models import (
    Sensor,
)

__all__ = [
    # Enums
    'AlarmStatus',
    'ArmingStatus',
    'SensorType',

    # Models
    'Sensor',
]
