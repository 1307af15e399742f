import io
from unittest import mock

import pytest

from carassembly.parts import (
    BrakeSystem,
    CarType,
    Engine,
    QuestionType,
    RunTest,
    SteeringSystem,
)
from carassembly.steps import (
    BrakeStep,
    CarTypeStep,
    EngineStep,
    InvalidAnswerError,
    RunTestStep,
    SteeringStep,
)


def test_car_type_step():
    step = CarTypeStep(QuestionType.CAR_TYPE, out=io.StringIO(), pause=lambda ms: None)
    assert step.index == QuestionType.CAR_TYPE
    assert "3. Truck" in step.prompt()
    for ans in range(0, CarType.TRUCK + 2):
        assert step.accepts(ans) == (CarType.SEDAN <= ans <= CarType.TRUCK)
    for ans in range(CarType.SEDAN, CarType.TRUCK + 1):
        assert step.next_step(ans) == QuestionType.ENGINE


def test_engine_step():
    step = EngineStep(QuestionType.ENGINE, out=io.StringIO(), pause=lambda ms: None)
    assert step.index == QuestionType.ENGINE
    assert "4. 고장난 엔진" in step.prompt()
    for ans in range(0, Engine.DEAD + 2):
        assert step.accepts(ans) == (0 <= ans <= Engine.DEAD)
    for ans in range(0, Engine.DEAD + 1):
        expected = QuestionType.CAR_TYPE if ans == 0 else QuestionType.BRAKE_SYSTEM
        assert step.next_step(ans) == expected


def test_brake_step():
    step = BrakeStep(QuestionType.BRAKE_SYSTEM, out=io.StringIO(), pause=lambda ms: None)
    assert step.index == QuestionType.BRAKE_SYSTEM
    assert "2. CONTINENTAL" in step.prompt()
    for ans in range(0, BrakeSystem.BOSCH + 2):
        assert step.accepts(ans) == (0 <= ans <= BrakeSystem.BOSCH)
    for ans in range(0, BrakeSystem.BOSCH + 1):
        expected = QuestionType.ENGINE if ans == 0 else QuestionType.STEERING_SYSTEM
        assert step.next_step(ans) == expected


def test_steering_step():
    step = SteeringStep(QuestionType.STEERING_SYSTEM, out=io.StringIO(), pause=lambda ms: None)
    assert step.index == QuestionType.STEERING_SYSTEM
    assert "2. MOBIS" in step.prompt()
    for ans in range(0, SteeringSystem.MOBIS + 2):
        assert step.accepts(ans) == (0 <= ans <= SteeringSystem.MOBIS)
    for ans in range(0, SteeringSystem.MOBIS + 1):
        expected = QuestionType.BRAKE_SYSTEM if ans == 0 else QuestionType.RUN_TEST
        assert step.next_step(ans) == expected


def test_run_test_step():
    step = RunTestStep(QuestionType.RUN_TEST, mock.Mock(), out=io.StringIO(), pause=lambda ms: None)
    assert step.index == QuestionType.RUN_TEST
    assert "2. Test" in step.prompt()
    for ans in range(0, RunTest.TEST_COMBINATION + 2):
        assert step.accepts(ans) == (0 <= ans <= RunTest.TEST_COMBINATION)
    for ans in range(0, SteeringSystem.MOBIS + 1):
        expected = QuestionType.CAR_TYPE if ans == 0 else QuestionType.RUN_TEST
        assert step.next_step(ans) == expected


@pytest.mark.parametrize(
    "cls, index, bad, message",
    [
        (CarTypeStep, QuestionType.CAR_TYPE, 0, "ERROR :: 차량 타입은 1 ~ 3 범위만 선택 가능"),
        (EngineStep, QuestionType.ENGINE, 5, "ERROR :: 엔진은 0 ~ 4 범위만 선택 가능"),
        (BrakeStep, QuestionType.BRAKE_SYSTEM, -1, "ERROR :: 제동장치는 0 ~ 3 범위만 선택 가능"),
        (SteeringStep, QuestionType.STEERING_SYSTEM, 3, "ERROR :: 조향장치는 0 ~ 2 범위만 선택 가능"),
    ],
)
def test_validate_raises_with_message(cls, index, bad, message):
    step = cls(index, out=io.StringIO(), pause=lambda ms: None)
    with pytest.raises(InvalidAnswerError) as info:
        step.validate(bad)
    assert str(info.value) == message
    assert info.value.answer == bad


def test_validate_run_test_out_of_range():
    step = RunTestStep(QuestionType.RUN_TEST, mock.Mock(), out=io.StringIO(), pause=lambda ms: None)
    with pytest.raises(InvalidAnswerError, match="Run 또는 Test"):
        step.validate(3)


def test_process_answer_records_and_confirms():
    out = io.StringIO()
    pauses = []
    step = EngineStep(QuestionType.ENGINE, out=out, pause=pauses.append)
    step.process_answer(Engine.TOYOTA)
    assert step.selection == Engine.TOYOTA
    assert out.getvalue() == "TOYOTA 엔진을 선택하셨습니다.\n"
    assert pauses == [800]


def test_process_answer_dead_engine_prints_nothing():
    out = io.StringIO()
    step = EngineStep(QuestionType.ENGINE, out=out, pause=lambda ms: None)
    step.process_answer(Engine.DEAD)
    assert step.selection == Engine.DEAD
    assert out.getvalue() == ""


def test_car_type_confirmation():
    out = io.StringIO()
    step = CarTypeStep(QuestionType.CAR_TYPE, out=out, pause=lambda ms: None)
    step.process_answer(CarType.SUV)
    assert out.getvalue() == "차량 타입으로 SUV을 선택하셨습니다.\n"
    assert step.selection == CarType.SUV


def test_run_test_step_runs_car():
    car = mock.Mock()
    out = io.StringIO()
    pauses = []
    step = RunTestStep(QuestionType.RUN_TEST, car, out=out, pause=pauses.append)
    step.process_answer(RunTest.RUN_CAR)
    assert car.method_calls == [mock.call.run_produced_car()]
    assert pauses == [2000]
    assert out.getvalue() == ""


def test_run_test_step_tests_combination():
    car = mock.Mock()
    out = io.StringIO()
    pauses = []
    step = RunTestStep(QuestionType.RUN_TEST, car, out=out, pause=pauses.append)
    step.process_answer(RunTest.TEST_COMBINATION)
    assert car.method_calls == [mock.call.test_produced_car()]
    assert out.getvalue() == "Test...\n"
    assert pauses == [1500, 2000]


def test_run_test_step_does_not_record_selection():
    car = mock.Mock()
    step = RunTestStep(QuestionType.RUN_TEST, car, out=io.StringIO(), pause=lambda ms: None)
    step.process_answer(RunTest.RUN_CAR)
    assert step.selection == 0
    assert car.method_calls == [mock.call.run_produced_car()]