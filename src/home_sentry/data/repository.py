"""
Security Repository - 持久化接口

Storage abstraction for sensors, alarm status and arming status:
- SecurityRepository: 抽象接口
- InMemorySecurityRepository: dict 实现 (demo / tests)
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Set

from ..domain.enums import AlarmStatus, ArmingStatus
from ..domain.models import Sensor


# =============================================================================
# Repository 抽象基类
# =============================================================================

class SecurityRepository(ABC):
    """Durability sink for the security system state.

    Status getters may return None when the store has never been written.
    """

    @abstractmethod
    def add_sensor(self, sensor: Sensor) -> None:
        pass

    @abstractmethod
    def remove_sensor(self, sensor: Sensor) -> None:
        pass

    @abstractmethod
    def update_sensor(self, sensor: Sensor) -> None:
        pass

    @abstractmethod
    def get_sensors(self) -> Set[Sensor]:
        pass

    @abstractmethod
    def get_alarm_status(self) -> Optional[AlarmStatus]:
        pass

    @abstractmethod
    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        pass

    @abstractmethod
    def get_arming_status(self) -> Optional[ArmingStatus]:
        pass

    @abstractmethod
    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        pass


# =============================================================================
# In-memory Repository
# =============================================================================

class InMemorySecurityRepository(SecurityRepository):
    """Dict-backed repository keyed by sensor identity."""

    def __init__(
        self,
        alarm_status: Optional[AlarmStatus] = None,
        arming_status: Optional[ArmingStatus] = None,
    ):
        self._sensors: Dict[tuple, Sensor] = {}
        self._alarm_status = alarm_status
        self._arming_status = arming_status

    def add_sensor(self, sensor: Sensor) -> None:
        self._sensors[sensor.key] = sensor

    def remove_sensor(self, sensor: Sensor) -> None:
        self._sensors.pop(sensor.key, None)

    def update_sensor(self, sensor: Sensor) -> None:
        # 未知 sensor 直接插入
        self._sensors[sensor.key] = sensor

    def get_sensors(self) -> Set[Sensor]:
        return set(self._sensors.values())

    def get_alarm_status(self) -> Optional[AlarmStatus]:
        return self._alarm_status

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        self._alarm_status = alarm_status

    def get_arming_status(self) -> Optional[ArmingStatus]:
        return self._arming_status

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        self._arming_status = arming_status
