"""Status listener interface for alarm/sensor/cat-detection updates."""

from abc import ABC, abstractmethod

from ..domain.enums import AlarmStatus


class StatusListener(ABC):
    """Observer registered with SecurityService (e.g. the UI panels).

    Callbacks run synchronously inside the service mutator that caused
    them. Changing service state from inside a callback is unsupported.
    """

    @abstractmethod
    def notify(self, status: AlarmStatus) -> None:
        pass

    @abstractmethod
    def cat_detected(self, cat_detected: bool) -> None:
        pass

    @abstractmethod
    def sensor_status_changed(self) -> None:
        pass
