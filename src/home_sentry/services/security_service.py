"""
Home Sentry Security Service

Receives arming changes, sensor activations and camera images, decides the
alarm status, forwards every change to the repository and notifies the
registered StatusListeners.

Key rules:
1. Disarming always clears the alarm (NO_ALARM)
2. Arming resets every sensor to inactive
3. Sensor activation escalates NO_ALARM → PENDING_ALARM → ALARM while armed
4. Once in ALARM, sensor changes cannot lower the status
5. A cat seen while disarmed forces ALARM once the system is armed

Calls are synchronous and unguarded; callers must serialize access.
"""

import logging
from typing import Any, Dict, Optional, Set, TypeVar

from ..data.repository import SecurityRepository
from ..domain.enums import AlarmStatus, ArmingStatus
from ..domain.models import Sensor
from ..image.classifier import ImageClassifier
from .config import SecurityServiceConfig
from .listeners import StatusListener

logger = logging.getLogger(__name__)

S = TypeVar("S", AlarmStatus, ArmingStatus)


def resolve_status(cached: S, stored: Optional[S]) -> S:
    """Pick between the in-memory value and the repository value.

    The cache wins when the store is uninitialized or disagrees with it.
    """
    if stored is None or stored != cached:
        return cached
    return stored


class SecurityService:
    """Alarm decision engine (the only component holding business logic)."""

    def __init__(
        self,
        security_repository: SecurityRepository,
        image_classifier: ImageClassifier,
        config: Optional[SecurityServiceConfig] = None,
    ):
        self.config = config or SecurityServiceConfig()
        self._repository = security_repository
        self._image_classifier = image_classifier

        # Ordered set of listeners, compared by identity
        self._status_listeners: Dict[StatusListener, None] = {}

        # Authoritative in-memory state
        self._alarm_status = AlarmStatus.NO_ALARM
        self._arming_status = ArmingStatus.DISARMED

        # Not persisted: history-dependent
        self._cat_seen_while_disarmed = False

    # =========================================================================
    # Queries
    # =========================================================================

    def get_alarm_status(self) -> AlarmStatus:
        return resolve_status(self._alarm_status, self._repository.get_alarm_status())

    def get_arming_status(self) -> ArmingStatus:
        return resolve_status(self._arming_status, self._repository.get_arming_status())

    def get_sensors(self) -> Set[Sensor]:
        """Return a copy of the repository's sensor set."""
        return set(self._repository.get_sensors())

    @property
    def cat_seen_while_disarmed(self) -> bool:
        return self._cat_seen_while_disarmed

    # =========================================================================
    # Listeners
    # =========================================================================

    def add_status_listener(self, status_listener: StatusListener) -> None:
        self._status_listeners[status_listener] = None

    def remove_status_listener(self, status_listener: StatusListener) -> None:
        self._status_listeners.pop(status_listener, None)

    def _listeners(self) -> list:
        # Snapshot so a listener may unregister itself mid-broadcast
        return list(self._status_listeners)

    def _notify_cat_detected(self, cat: bool) -> None:
        for listener in self._listeners():
            listener.cat_detected(cat)

    def _notify_sensor_status_changed(self) -> None:
        for listener in self._listeners():
            listener.sensor_status_changed()

    # =========================================================================
    # Sensors
    # =========================================================================

    def add_sensor(self, sensor: Sensor) -> None:
        self._repository.add_sensor(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        self._repository.remove_sensor(sensor)

    # =========================================================================
    # Mutators
    # =========================================================================

    def set_alarm_status(self, status: AlarmStatus) -> None:
        """Change the alarm status and notify all listeners."""
        previous = self._alarm_status
        self._alarm_status = status
        self._repository.set_alarm_status(status)
        logger.info("Alarm status %s → %s", previous.value, status.value)

        for listener in self._listeners():
            listener.notify(status)

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Set the arming status; may change the alarm status and reset sensors."""
        self._arming_status = arming_status
        self._repository.set_arming_status(arming_status)
        logger.info("Arming status set to %s", arming_status.value)

        if arming_status == ArmingStatus.DISARMED:
            self.set_alarm_status(AlarmStatus.NO_ALARM)
        else:
            # Flag stays set until the next cat-detection evaluation
            if self._cat_seen_while_disarmed:
                self.set_alarm_status(AlarmStatus.ALARM)

            for sensor in self.get_sensors():
                self.change_sensor_activation_status(sensor, False)

        self._notify_sensor_status_changed()

    def change_sensor_activation_status(self, sensor: Sensor, active: bool) -> None:
        """Change the activation status for a sensor and update alarm status if necessary."""
        # Retriggered while pending → straight to ALARM
        if active and sensor.active and self.get_alarm_status() == AlarmStatus.PENDING_ALARM:
            logger.debug("Sensor %s retriggered while pending", sensor.name)
            self.set_alarm_status(AlarmStatus.ALARM)
            return

        if not sensor.active and active:
            logger.debug("Sensor %s activated", sensor.name)
            self._handle_sensor_activated()
        elif sensor.active and not active:
            logger.debug("Sensor %s deactivated", sensor.name)
            sensor.active = False
            self._handle_sensor_deactivated(sensor)

        sensor.active = active
        self._repository.update_sensor(sensor)

    def process_image(self, current_camera_image: Any) -> None:
        """Classify a camera frame and update alarm status from the result."""
        cat = self._image_classifier.contains_cat(
            current_camera_image,
            self.config.cat_confidence_threshold,
        )
        self._cat_detected(cat)

    # =========================================================================
    # Internal handlers
    # =========================================================================

    def _cat_detected(self, cat: bool) -> None:
        logger.debug("Cat detection result: %s", cat)

        if self.get_arming_status() != ArmingStatus.DISARMED:
            # Armed after a cat was seen while disarmed
            if self._cat_seen_while_disarmed:
                self.set_alarm_status(AlarmStatus.ALARM)
                self._cat_seen_while_disarmed = False
                self._notify_cat_detected(cat)
                return

            if cat:
                self.set_alarm_status(AlarmStatus.ALARM)
                self._notify_cat_detected(cat)
                return

            if any(s.active for s in self.get_sensors()):
                self._notify_cat_detected(cat)
                return

            self.set_alarm_status(AlarmStatus.NO_ALARM)
        else:
            if cat:
                self._cat_seen_while_disarmed = True
            self.set_alarm_status(AlarmStatus.NO_ALARM)

        self._notify_cat_detected(cat)

    def _handle_sensor_activated(self) -> None:
        if self.get_alarm_status() == AlarmStatus.ALARM:
            return

        if self.get_arming_status() == ArmingStatus.DISARMED:
            return

        status = self.get_alarm_status()
        if status == AlarmStatus.NO_ALARM:
            self.set_alarm_status(AlarmStatus.PENDING_ALARM)
        elif status == AlarmStatus.PENDING_ALARM:
            self.set_alarm_status(AlarmStatus.ALARM)

    def _handle_sensor_deactivated(self, sensor_being_modified: Sensor) -> None:
        if self.get_alarm_status() == AlarmStatus.ALARM:
            return

        any_other_sensor_active = any(
            s.active for s in self._repository.get_sensors()
            if s != sensor_being_modified
        )
        if any_other_sensor_active or sensor_being_modified.active:
            return

        status = self.get_alarm_status()
        if status == AlarmStatus.PENDING_ALARM:
            self.set_alarm_status(AlarmStatus.NO_ALARM)
        elif status == AlarmStatus.ALARM:
            # Unreachable behind the ALARM guard above; kept so ALARM can
            # soften to PENDING if that guard is ever relaxed
            self.set_alarm_status(AlarmStatus.PENDING_ALARM)
