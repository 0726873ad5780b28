"""
Home Sentry Core Models

Sensor model. Uses Pydantic for validation and serialization.
"""

import uuid
from functools import total_ordering

from pydantic import BaseModel, Field, field_validator

from .enums import SensorType


@total_ordering
class Sensor(BaseModel):
    """A door/window/motion input with a mutable activation flag.

    Identity is (name, sensor_type). The active flag and the generated
    sensor_id never take part in equality or hashing, so a sensor keeps
    its place in sets and dicts while it is toggled.
    """
    name: str
    sensor_type: SensorType
    active: bool = False
    sensor_id: str = Field(default_factory=lambda: uuid.uuid4().hex)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Sensor name must not be blank')
        return v

    @property
    def key(self) -> tuple[str, str]:
        return (self.name, self.sensor_type.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __lt__(self, other: "Sensor") -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.key < other.key
