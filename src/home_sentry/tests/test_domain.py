"""
Tests for domain enums and Sensor model
"""

import pytest
from pydantic import ValidationError

from home_sentry.domain import AlarmStatus, ArmingStatus, Sensor, SensorType


class TestEnums:

    def test_is_armed(self):
        assert ArmingStatus.DISARMED.is_armed() is False
        assert ArmingStatus.ARMED_HOME.is_armed() is True
        assert ArmingStatus.ARMED_AWAY.is_armed() is True

    def test_descriptions(self):
        assert AlarmStatus.ALARM.description == "Awooga!"
        assert ArmingStatus.ARMED_HOME.description == "Armed - At Home"

    def test_string_values(self):
        assert AlarmStatus("pending_alarm") is AlarmStatus.PENDING_ALARM
        assert SensorType.WINDOW.value == "window"


class TestSensor:

    def test_defaults(self):
        sensor = Sensor(name="Kitchen Window", sensor_type=SensorType.WINDOW)

        assert sensor.active is False
        assert len(sensor.sensor_id) == 32

    def test_equality_ignores_active_and_id(self):
        a = Sensor(name="Door", sensor_type=SensorType.DOOR, active=True)
        b = Sensor(name="Door", sensor_type=SensorType.DOOR)

        assert a == b
        assert hash(a) == hash(b)
        assert a.sensor_id != b.sensor_id

    def test_different_type_is_different_sensor(self):
        a = Sensor(name="Garage", sensor_type=SensorType.DOOR)
        b = Sensor(name="Garage", sensor_type=SensorType.MOTION)

        assert a != b
        assert len({a, b}) == 2

    def test_toggling_keeps_set_membership(self):
        sensor = Sensor(name="Hall", sensor_type=SensorType.MOTION)
        sensors = {sensor}

        sensor.active = True

        assert sensor in sensors

    def test_ordering(self):
        b = Sensor(name="B", sensor_type=SensorType.DOOR)
        a_window = Sensor(name="A", sensor_type=SensorType.WINDOW)
        a_door = Sensor(name="A", sensor_type=SensorType.DOOR)

        assert sorted([b, a_window, a_door]) == [a_door, a_window, b]

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            Sensor(name="  ", sensor_type=SensorType.DOOR)

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            Sensor(name="Vent", sensor_type="vent")

    def test_type_from_string(self):
        sensor = Sensor(name="Porch", sensor_type="motion")

        assert sensor.sensor_type is SensorType.MOTION
