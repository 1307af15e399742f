"""The questions of the assembly dialogue, one class per question."""

from __future__ import annotations

import sys
from typing import Callable, Protocol, TextIO

from .parts import (
    BrakeSystem,
    CarType,
    Engine,
    QuestionType,
    RunTest,
    SteeringSystem,
    delay,
)


class InvalidAnswerError(ValueError):
    """Raised when an answer lies outside the range a step accepts."""

    def __init__(self, answer: int, message: str) -> None:
        super().__init__(message)
        self.answer = answer


class _ProducedCar(Protocol):
    def run_produced_car(self) -> None: ...

    def test_produced_car(self) -> None: ...


class Step:
    """One question: its menu, accepted answers and what an answer does."""

    menu: str = ""
    valid_answers: range = range(0)
    error_message: str = ""
    confirmations: dict[int, str] = {}

    def __init__(
        self,
        index: int,
        *,
        out: TextIO | None = None,
        pause: Callable[[float], None] | None = None,
    ) -> None:
        self.index = int(index)
        self.selection = 0
        self._out = out
        self._pause_func = pause

    def _emit(self, text: str) -> None:
        (self._out or sys.stdout).write(text)

    def _pause(self, ms: float) -> None:
        (self._pause_func or delay)(ms)

    def prompt(self) -> str:
        """Return the menu text for this question."""
        return self.menu

    def accepts(self, answer: int) -> bool:
        return answer in self.valid_answers

    def validate(self, answer: int) -> None:
        """Raise InvalidAnswerError if the answer is out of range."""
        if not self.accepts(answer):
            raise InvalidAnswerError(answer, self.error_message)

    def next_step(self, answer: int) -> int:
        """Index of the question that follows this answer; 0 goes back."""
        return self.index - 1 if answer == 0 else self.index + 1

    def process_answer(self, answer: int) -> None:
        """Record the chosen part and confirm the choice."""
        confirmation = self.confirmations.get(answer)
        if confirmation:
            self._emit(confirmation + "\n")
        self.selection = answer
        self._pause(800)


class CarTypeStep(Step):
    menu = (
        "        ______________\n"
        "       /|            | \n"
        "  ____/_|_____________|____\n"
        " |                      O  |\n"
        " '-(@)----------------(@)--'\n"
        "===============================\n"
        "어떤 차량 타입을 선택할까요?\n"
        "1. Sedan\n"
        "2. SUV\n"
        "3. Truck\n"
    )
    valid_answers = range(CarType.SEDAN, CarType.TRUCK + 1)
    error_message = "ERROR :: 차량 타입은 1 ~ 3 범위만 선택 가능"
    confirmations = {
        CarType.SEDAN: "차량 타입으로 Sedan을 선택하셨습니다.",
        CarType.SUV: "차량 타입으로 SUV을 선택하셨습니다.",
        CarType.TRUCK: "차량 타입으로 Truck을 선택하셨습니다.",
    }

    def next_step(self, answer: int) -> int:
        return self.index + 1


class EngineStep(Step):
    menu = (
        "어떤 엔진을 탑재할까요?\n"
        "0. 뒤로가기\n"
        "1. GM\n"
        "2. TOYOTA\n"
        "3. WIA\n"
        "4. 고장난 엔진\n"
    )
    valid_answers = range(0, Engine.DEAD + 1)
    error_message = "ERROR :: 엔진은 0 ~ 4 범위만 선택 가능"
    confirmations = {
        Engine.GM: "GM 엔진을 선택하셨습니다.",
        Engine.TOYOTA: "TOYOTA 엔진을 선택하셨습니다.",
        Engine.WIA: "WIA 엔진을 선택하셨습니다.",
    }


class BrakeStep(Step):
    menu = (
        "어떤 제동장치를 선택할까요?\n"
        "0. 뒤로가기\n"
        "1. MANDO\n"
        "2. CONTINENTAL\n"
        "3. BOSCH\n"
    )
    valid_answers = range(0, BrakeSystem.BOSCH + 1)
    error_message = "ERROR :: 제동장치는 0 ~ 3 범위만 선택 가능"
    confirmations = {
        BrakeSystem.MANDO: "MANDO 제동장치를 선택하셨습니다.",
        BrakeSystem.CONTINENTAL: "CONTINENTAL 제동장치를 선택하셨습니다.",
        BrakeSystem.BOSCH: "BOSCH 제동장치를 선택하셨습니다.",
    }


class SteeringStep(Step):
    menu = (
        "어떤 조향장치를 선택할까요?\n"
        "0. 뒤로가기\n"
        "1. BOSCH\n"
        "2. MOBIS\n"
    )
    valid_answers = range(0, SteeringSystem.MOBIS + 1)
    error_message = "ERROR :: 조향장치는 0 ~ 2 범위만 선택 가능"
    confirmations = {
        SteeringSystem.BOSCH: "BOSCH 조향장치를 선택하셨습니다.",
        SteeringSystem.MOBIS: "MOBIS 조향장치를 선택하셨습니다.",
    }


class RunTestStep(Step):
    """Final question: run the assembled car or test its combination."""

    menu = (
        "멋진 차량이 완성되었습니다.\n"
        "어떤 동작을 할까요?\n"
        "0. 처음 화면으로 돌아가기\n"
        "1. RUN\n"
        "2. Test\n"
    )
    valid_answers = range(0, RunTest.TEST_COMBINATION + 1)
    error_message = "ERROR :: Run 또는 Test 중 하나를 선택 필요"

    def __init__(
        self,
        index: int,
        assembly: _ProducedCar,
        *,
        out: TextIO | None = None,
        pause: Callable[[float], None] | None = None,
    ) -> None:
        super().__init__(index, out=out, pause=pause)
        self.assembly = assembly

    def next_step(self, answer: int) -> int:
        return int(QuestionType.CAR_TYPE) if answer == 0 else self.index

    def process_answer(self, answer: int) -> None:
        if answer == RunTest.RUN_CAR:
            self.assembly.run_produced_car()
        elif answer == RunTest.TEST_COMBINATION:
            self._emit("Test...\n")
            self._pause(1500)
            self.assembly.test_produced_car()
        self._pause(2000)