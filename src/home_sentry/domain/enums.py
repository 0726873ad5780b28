"""
Home Sentry Core Enums

Alarm status, arming status and sensor types used throughout the system.
"""

from enum import Enum


# =============================================================================
# Alarm Status
# =============================================================================

class AlarmStatus(str, Enum):
    """Current alert level of the system."""
    NO_ALARM = "no_alarm"
    PENDING_ALARM = "pending_alarm"
    ALARM = "alarm"

    @property
    def description(self) -> str:
        return _ALARM_DESCRIPTIONS[self]


_ALARM_DESCRIPTIONS = {
    AlarmStatus.NO_ALARM: "Cool and Good",
    AlarmStatus.PENDING_ALARM: "I'm in Danger...",
    AlarmStatus.ALARM: "Awooga!",
}


# =============================================================================
# Arming Status
# =============================================================================

class ArmingStatus(str, Enum):
    """Whether and how the system is armed."""
    DISARMED = "disarmed"
    ARMED_HOME = "armed_home"
    ARMED_AWAY = "armed_away"

    @property
    def description(self) -> str:
        return _ARMING_DESCRIPTIONS[self]

    def is_armed(self) -> bool:
        """Check if system is armed (not DISARMED)."""
        return self != ArmingStatus.DISARMED


_ARMING_DESCRIPTIONS = {
    ArmingStatus.DISARMED: "Disarmed",
    ArmingStatus.ARMED_HOME: "Armed - At Home",
    ArmingStatus.ARMED_AWAY: "Armed - Away",
}


# =============================================================================
# Sensor Type
# =============================================================================

class SensorType(str, Enum):
    """Physical sensor kind."""
    DOOR = "door"
    WINDOW = "window"
    MOTION = "motion"
