"""Interactive dialogue that assembles a car from console answers."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, Iterable, TextIO

from .assembly import CarAssembly
from .parts import QuestionType, delay
from .steps import InvalidAnswerError

CLEAR_SCREEN = "\033[H\033[2J"
SEPARATOR = "==============================="

_NUMBER = re.compile(r"\s*[+-]?\d+")


def _strip_line(text: str) -> str:
    return re.split(r"[\r\n]", text, maxsplit=1)[0]


def parse_answer(text: str) -> int:
    """Read a decimal answer from one input line; raise ValueError otherwise.

    An empty line reads as 0.
    """
    line = _strip_line(text)
    if line == "":
        return 0
    if not _NUMBER.fullmatch(line):
        raise ValueError(f"not a number: {line!r}")
    return int(line)


def run_session(
    lines: Iterable[str],
    out: TextIO | None = None,
    pause: Callable[[float], None] | None = None,
) -> CarAssembly:
    """Run the dialogue over the given input lines and return the assembly.

    The dialogue ends on the line "exit" or when the input runs out.
    """
    out = out if out is not None else sys.stdout
    pause = pause if pause is not None else delay
    assembly = CarAssembly(out=out, pause=pause)
    step = assembly.get_step(QuestionType.CAR_TYPE)
    source = iter(lines)

    while True:
        out.write(CLEAR_SCREEN)
        out.write(step.prompt())
        out.write(SEPARATOR + "\n")
        out.write("INPUT > ")

        line = next(source, None)
        if line is None:
            break
        if _strip_line(line) == "exit":
            out.write("바이바이\n")
            break

        try:
            answer = parse_answer(line)
        except ValueError:
            out.write("ERROR :: 숫자만 입력 가능\n")
            pause(800)
            continue

        try:
            step.validate(answer)
        except InvalidAnswerError as error:
            out.write(f"{error}\n")
            pause(800)
            continue

        following = step.next_step(answer)
        if following >= step.index:
            step.process_answer(answer)
        step = assembly.get_step(following)

    return assembly


def main(argv: list[str] | None = None) -> int:
    """Start the assembly dialogue on the console."""
    parser = argparse.ArgumentParser(
        prog="carassembly", description="Assemble a car step by step."
    )
    parser.parse_args(argv)
    run_session(sys.stdin, sys.stdout, delay)
    return 0