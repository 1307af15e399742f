"""Part catalogues, question order and the rules for combining parts."""

from __future__ import annotations

import time
from enum import IntEnum


class QuestionType(IntEnum):
    """The questions asked while assembling a car, in order."""

    CAR_TYPE = 0
    ENGINE = 1
    BRAKE_SYSTEM = 2
    STEERING_SYSTEM = 3
    RUN_TEST = 4


class CarType(IntEnum):
    SEDAN = 1
    SUV = 2
    TRUCK = 3


class Engine(IntEnum):
    GM = 1
    TOYOTA = 2
    WIA = 3
    DEAD = 4


class BrakeSystem(IntEnum):
    MANDO = 1
    CONTINENTAL = 2
    BOSCH = 3


class SteeringSystem(IntEnum):
    BOSCH = 1
    MOBIS = 2


class RunTest(IntEnum):
    RUN_CAR = 1
    TEST_COMBINATION = 2


class ErrorType(IntEnum):
    """Why a combination of parts cannot work."""

    NONE = 0
    SEDAN_CONTINENTAL = 1
    SUV_TOYOTA = 2
    TRUCK_WIA = 3
    TRUCK_MANDO = 4
    BOSCH_BRAKE_BOSCH_STEERING = 5

    @property
    def message(self) -> str:
        """Explanation shown when a combination test fails; empty for NONE."""
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES = {
    ErrorType.NONE: "",
    ErrorType.SEDAN_CONTINENTAL: "Sedan에는 Continental제동장치 사용 불가",
    ErrorType.SUV_TOYOTA: "SUV에는 TOYOTA엔진 사용 불가",
    ErrorType.TRUCK_WIA: "Truck에는 WIA엔진 사용 불가",
    ErrorType.TRUCK_MANDO: "Truck에는 Mando제동장치 사용 불가",
    ErrorType.BOSCH_BRAKE_BOSCH_STEERING: "Bosch제동장치에는 Bosch조향장치 이외 사용 불가",
}


def find_error(car_type: int, engine: int, brake: int, steering: int) -> ErrorType:
    """Return the first rule the given parts break, or ErrorType.NONE."""
    if car_type == CarType.SEDAN and brake == BrakeSystem.CONTINENTAL:
        return ErrorType.SEDAN_CONTINENTAL
    if car_type == CarType.SUV and engine == Engine.TOYOTA:
        return ErrorType.SUV_TOYOTA
    if car_type == CarType.TRUCK and engine == Engine.WIA:
        return ErrorType.TRUCK_WIA
    if car_type == CarType.TRUCK and brake == BrakeSystem.MANDO:
        return ErrorType.TRUCK_MANDO
    if brake == BrakeSystem.BOSCH and steering != SteeringSystem.BOSCH:
        return ErrorType.BOSCH_BRAKE_BOSCH_STEERING
    return ErrorType.NONE


def delay(ms: float) -> None:
    """Pause for the given number of milliseconds."""
    time.sleep(ms / 1000)