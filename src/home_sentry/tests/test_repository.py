"""
Tests for InMemorySecurityRepository
"""

from home_sentry.data import InMemorySecurityRepository
from home_sentry.domain import AlarmStatus, ArmingStatus, Sensor, SensorType


class TestInMemorySecurityRepository:

    def test_status_uninitialized(self):
        repo = InMemorySecurityRepository()

        assert repo.get_alarm_status() is None
        assert repo.get_arming_status() is None

    def test_status_round_trip(self):
        repo = InMemorySecurityRepository()

        repo.set_alarm_status(AlarmStatus.ALARM)
        repo.set_arming_status(ArmingStatus.ARMED_AWAY)

        assert repo.get_alarm_status() == AlarmStatus.ALARM
        assert repo.get_arming_status() == ArmingStatus.ARMED_AWAY

    def test_add_and_remove_sensor(self):
        repo = InMemorySecurityRepository()
        sensor = Sensor(name="Back Door", sensor_type=SensorType.DOOR)

        repo.add_sensor(sensor)
        assert repo.get_sensors() == {sensor}

        repo.remove_sensor(Sensor(name="Back Door", sensor_type=SensorType.DOOR))
        assert repo.get_sensors() == set()

    def test_remove_unknown_sensor_is_noop(self):
        repo = InMemorySecurityRepository()

        repo.remove_sensor(Sensor(name="Ghost", sensor_type=SensorType.MOTION))

        assert repo.get_sensors() == set()

    def test_update_replaces_stored_sensor(self):
        repo = InMemorySecurityRepository()
        repo.add_sensor(Sensor(name="Den", sensor_type=SensorType.WINDOW))
        updated = Sensor(name="Den", sensor_type=SensorType.WINDOW, active=True)

        repo.update_sensor(updated)

        (stored,) = repo.get_sensors()
        assert stored is updated
        assert stored.active is True

    def test_get_sensors_returns_new_set(self):
        repo = InMemorySecurityRepository()
        repo.add_sensor(Sensor(name="Attic", sensor_type=SensorType.MOTION))

        repo.get_sensors().clear()

        assert len(repo.get_sensors()) == 1
