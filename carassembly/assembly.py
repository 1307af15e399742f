"""A car being assembled: the chosen parts and what the car can do."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from .parts import (
    BrakeSystem,
    CarType,
    Engine,
    ErrorType,
    QuestionType,
    SteeringSystem,
    find_error,
)
from .steps import (
    BrakeStep,
    CarTypeStep,
    EngineStep,
    RunTestStep,
    SteeringStep,
    Step,
)

_CAR_TYPE_NAMES = {
    CarType.SEDAN: "Sedan",
    CarType.SUV: "SUV",
    CarType.TRUCK: "Truck",
}
_ENGINE_NAMES = {
    Engine.GM: "GM",
    Engine.TOYOTA: "TOYOTA",
    Engine.WIA: "WIA",
}
_BRAKE_NAMES = {
    BrakeSystem.MANDO: "Mando",
    BrakeSystem.CONTINENTAL: "Continental",
    BrakeSystem.BOSCH: "Bosch",
}
_STEERING_NAMES = {
    SteeringSystem.BOSCH: "Bosch",
    SteeringSystem.MOBIS: "Mobis",
}


class CarAssembly:
    """Holds the questions of the dialogue and judges the chosen parts."""

    def __init__(
        self,
        *,
        out: TextIO | None = None,
        pause: Callable[[float], None] | None = None,
    ) -> None:
        self._out = out
        self._steps: list[Step] = [
            CarTypeStep(QuestionType.CAR_TYPE, out=out, pause=pause),
            EngineStep(QuestionType.ENGINE, out=out, pause=pause),
            BrakeStep(QuestionType.BRAKE_SYSTEM, out=out, pause=pause),
            SteeringStep(QuestionType.STEERING_SYSTEM, out=out, pause=pause),
            RunTestStep(QuestionType.RUN_TEST, self, out=out, pause=pause),
        ]

    def _emit(self, text: str) -> None:
        (self._out or sys.stdout).write(text)

    def _selection(self, question: QuestionType) -> int:
        return self._steps[question].selection

    def get_step(self, index: int) -> Step | None:
        """Return the step with the given index, or None if there is none."""
        if 0 <= index < len(self._steps):
            return self._steps[index]
        return None

    def error_type(self) -> ErrorType:
        """The first rule the chosen parts break, or ErrorType.NONE."""
        return find_error(
            self._selection(QuestionType.CAR_TYPE),
            self._selection(QuestionType.ENGINE),
            self._selection(QuestionType.BRAKE_SYSTEM),
            self._selection(QuestionType.STEERING_SYSTEM),
        )

    def is_valid_combination(self) -> bool:
        return self.error_type() is ErrorType.NONE

    def has_dead_engine(self) -> bool:
        return self._selection(QuestionType.ENGINE) == Engine.DEAD

    def describe(self) -> list[str]:
        """Lines naming each chosen part; parts not chosen are left out."""
        lines = []
        for label, question, names in (
            ("Car Type", QuestionType.CAR_TYPE, _CAR_TYPE_NAMES),
            ("Engine", QuestionType.ENGINE, _ENGINE_NAMES),
            ("Break System", QuestionType.BRAKE_SYSTEM, _BRAKE_NAMES),
            ("SteeringSystem", QuestionType.STEERING_SYSTEM, _STEERING_NAMES),
        ):
            name = names.get(self._selection(question))
            if name is not None:
                lines.append(f"{label} : {name}")
        return lines

    def run_produced_car(self) -> None:
        """Try to drive the car and report what happens."""
        if not self.is_valid_combination():
            self._emit("자동차가 동작되지 않습니다\n")
            return
        if self.has_dead_engine():
            self._emit("엔진이 고장나있습니다.\n")
            self._emit("자동차가 움직이지 않습니다.\n")
            return
        for line in self.describe():
            self._emit(line + "\n")
        self._emit("자동차가 동작됩니다.\n")

    def test_produced_car(self) -> None:
        """Report whether the combination of parts passes the rules."""
        error = self.error_type()
        if error is ErrorType.NONE:
            self._emit("자동차 부품 조합 테스트 결과 : PASS\n")
            return
        self._emit("자동차 부품 조합 테스트 결과 : FAIL\n")
        self._emit(error.message + "\n")