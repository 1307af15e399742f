# carassembly

A small interactive console program for assembling a car from parts and
checking whether the chosen parts work together. Menus and messages are in
Korean.

You pick, one step at a time:

1. a car type: Sedan, SUV or Truck
2. an engine: GM, TOYOTA, WIA, or a broken engine
3. a brake system: MANDO, CONTINENTAL or BOSCH
4. a steering system: BOSCH or MOBIS

Then you can **RUN** the finished car or **Test** the combination of parts.

## Installation

```
pip install .
```

## Usage

Start the program:

```
carassembly
```

At each `INPUT >` prompt, type the number of an option and press Enter.

- On the engine, brake and steering steps, `0` goes back one step. On the
  final screen, `0` returns to the first step. The car type step accepts
  only 1 to 3.
- Answers outside a step's range are rejected with an error message, and the
  same step is shown again.
- Input that is not a whole number is rejected. An empty line counts as `0`.
- After RUN or Test the final screen is shown again, so you can do either
  once more or go back to the start.
- `exit` ends the program, as does the end of input.

Between screens the program pauses briefly so messages can be read.

## Combination rules

The test reports `FAIL` for these combinations, checked in this order (only
the first one that applies is reported):

- a Sedan with a CONTINENTAL brake system
- an SUV with a TOYOTA engine
- a Truck with a WIA engine
- a Truck with a MANDO brake system
- a BOSCH brake system with any steering system other than BOSCH

Any other combination passes. Running a car whose combination fails prints
that the car does not work. A car with a broken engine passes the
combination test, but it does not move when run. A working car prints its
parts and then that it runs.

## Using it from Python

`carassembly.parts` holds the part catalogues as `IntEnum` classes
(`CarType`, `Engine`, `BrakeSystem`, `SteeringSystem`, `RunTest`,
`QuestionType`, `ErrorType`) and the rules on their own as
`find_error(car_type, engine, brake, steering)`, which returns an
`ErrorType`; `ErrorType.message` gives the explanation for a failure.

`carassembly.assembly.CarAssembly` holds the five steps. Get a step with
`get_step(index)` (it returns `None` for an index out of range), pass it an
answer with `process_answer(answer)`, and check the result with
`error_type()`, `is_valid_combination()`, `has_dead_engine()` or
`describe()`. `run_produced_car()` and `test_produced_car()` print the same
reports as the console program. `CarAssembly` takes optional `out` (a text
stream) and `pause` (a function taking milliseconds) keyword arguments.

Each step in `carassembly.steps` offers `prompt()`, `accepts(answer)`,
`validate(answer)` (which raises `InvalidAnswerError` for an answer out of
range), `next_step(answer)` and `process_answer(answer)`.

The interactive loop can be driven without a terminal through
`carassembly.cli.run_session(lines, out, pause)`, which returns the
`CarAssembly` it built. `carassembly.cli.parse_answer(text)` reads one
answer line and raises `ValueError` if it is not a number.

```python
import io
from carassembly.cli import run_session

out = io.StringIO()
assembly = run_session(["1", "1", "1", "1", "2", "exit"], out, lambda ms: None)
print(assembly.is_valid_combination())  # True
```

## Running the tests

```
pip install ".[test]"
pytest
```