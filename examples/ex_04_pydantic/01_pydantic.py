"""Pydantic: check untyped payloads at the model boundary.

A kind used as a model field annotation turns incoming lists into the kind
and reports non-conforming elements as ordinary validation errors.
"""

from __future__ import annotations

from pydantic import BaseModel, ValidationError

from arrayof import ArrayOf


class Sensor:
    def __init__(self, name: str) -> None:
        self.name = name


class ArrayOfSensor(ArrayOf):
    pass


class Station(BaseModel):
    name: str
    sensors: ArrayOfSensor


def main() -> None:
    station = Station(name="north", sensors=[Sensor("t1"), Sensor("t2")])

    print(f"sensors_type={type(station.sensors).__name__}")  # => sensors_type=ArrayOfSensor
    print(f"sensor_names={[sensor.name for sensor in station.sensors]}")  # => sensor_names=['t1', 't2']

    try:
        Station(name="south", sensors=[Sensor("t1"), "t2"])
    except ValidationError as error:
        print(f"error_count={error.error_count()}")  # => error_count=1
        print(f"error_field={error.errors()[0]['loc'][0]}")  # => error_field=sensors


if __name__ == "__main__":
    main()
