"""A tiny machine that runs programs of signed four-digit words."""

from __future__ import annotations

from collections.abc import Callable, Iterable

MEMORY_SIZE = 100
SENTINEL = -99999
HALT = 4300
WORD_MIN, WORD_MAX = -9999, 9999


class SimpletronError(Exception):
    """Raised when a program cannot be loaded or run."""


def _valid_word(value: int) -> bool:
    return WORD_MIN <= value <= WORD_MAX


def _truncating_div(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def _read_from_console() -> int:
    return int(input("? ").strip())


class Simpletron:
    """A machine with a 100-word memory and a single accumulator.

    An instruction's first two digits are the operation and its last two
    the memory location it works on.
    """

    def __init__(
        self,
        read_value: Callable[[], int] | None = None,
        write_value: Callable[[int], object] | None = None,
    ) -> None:
        self.read_value = read_value or _read_from_console
        self.write_value = write_value or print
        self.memory = [0] * MEMORY_SIZE
        self.accumulator = 0
        self.counter = 0

    def load(self, words: Iterable[int]) -> None:
        """Load a program from location 00; a ``-99999`` word ends it.

        A halt instruction is placed after the last word when there is room.
        """
        program: list[int] = []
        for word in words:
            if word == SENTINEL:
                break
            if not _valid_word(word):
                raise SimpletronError(
                    "Invalid instruction, must be signed 4 digit number."
                )
            if len(program) >= MEMORY_SIZE:
                raise SimpletronError("Memory full, halting instructions.")
            program.append(word)
        if len(program) < MEMORY_SIZE:
            program.append(HALT)
        self.memory = program + [0] * (MEMORY_SIZE - len(program))
        self.accumulator = 0
        self.counter = 0

    def run(self) -> int:
        """Run the loaded program and return the final accumulator."""
        self.counter = 0
        self.accumulator = 0
        while self.counter < MEMORY_SIZE:
            word = self.memory[self.counter]
            if word >= HALT:
                break
            operation, operand = divmod(word, 100) if word >= 0 else (None, None)
            if operation == 42:
                self._branch(operand, self.accumulator == 0)
            elif operation == 41:
                self._branch(operand, self.accumulator < 0)
            elif operation == 40:
                self._branch(operand, True)
            elif operation == 33:
                self.accumulator *= self.memory[operand]
                self.counter += 1
            elif operation == 32:
                divisor = self.memory[operand]
                if divisor == 0:
                    raise SimpletronError("Cannot divide by 0.")
                self.accumulator = _truncating_div(self.accumulator, divisor)
                self.counter += 1
            elif operation == 31:
                self.accumulator -= self.memory[operand]
                self.counter += 1
            elif operation == 30:
                self.accumulator += self.memory[operand]
                self.counter += 1
            elif operation == 21:
                self.memory[operand] = self.accumulator
                self.counter += 1
            elif operation == 20:
                self.accumulator = self.memory[operand]
                self.counter += 1
            elif operation == 11:
                self.write_value(self.memory[operand])
                self.counter += 1
            elif operation == 10:
                value = self.read_value()
                if not _valid_word(value):
                    raise SimpletronError(
                        "Value being read into memory must be a signed 4 digit number."
                    )
                self.memory[operand] = value
                self.counter += 1
            else:
                raise SimpletronError(
                    f"Invalid instruction {word} at location {self.counter:02d}."
                )
        return self.accumulator

    def _branch(self, target: int, taken: bool) -> None:
        self.counter = target if taken else self.counter + 1


def _prompt_value() -> int:
    while True:
        try:
            value = int(input("? ").strip())
        except ValueError:
            print("Value being read into memory must be a signed 4 digit number.")
            continue
        if _valid_word(value):
            return value
        print("Value being read into memory must be a signed 4 digit number.")


def main(argv=None) -> int:
    """Load a program from the keyboard and run it."""
    print("*** Enter your program instructions ***")
    print("*** Enter -99999 to stop ***")
    words: list[int] = []
    while True:
        try:
            raw = input(f"{len(words):02d} ? ").strip()
        except EOFError:
            break
        try:
            word = int(raw)
        except ValueError:
            print("Invalid instruction, must be signed 4 digit number.")
            continue
        if word == SENTINEL:
            break
        if not _valid_word(word):
            print("Invalid instruction, must be signed 4 digit number.")
            continue
        if len(words) >= MEMORY_SIZE:
            print("Memory full, halting instructions.")
            break
        words.append(word)
    print("*** Program loading ended. ***")
    print("*** Program running started. ***")
    machine = Simpletron(_prompt_value, print)
    machine.load(words)
    try:
        machine.run()
    except (SimpletronError, EOFError) as error:
        print(error)
        return 1
    print("*** Program execution ended ***")
    print(f"Accumulator: {machine.accumulator}")
    print(f"Instruction Counter: {machine.counter}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())