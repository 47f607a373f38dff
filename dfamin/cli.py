"""Interactive command that reads a DFA and prints its minimised form."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import TextIO

from dfamin.automaton import SINK_STATE, Automaton


class _Tokens:
    """Whitespace-separated tokens read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def word(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError("unexpected end of input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def integer(self) -> int | None:
        """The next token as an integer, or None when it is not one."""
        try:
            return int(self.word())
        except ValueError:
            return None

    def drop_line(self) -> None:
        self._pending.clear()


def _braced(names) -> str:
    return "{" + ",".join(names) + "}"


def read_automaton(stdin: TextIO, stdout: TextIO) -> Automaton:
    """Prompt for an automaton on ``stdout`` and read it from ``stdin``."""
    tokens = _Tokens(stdin)
    write = stdout.write

    write("\nStep 1: Define Alphabet\n")
    write("Enter alphabet symbols (e.g., ab for alphabet {a,b}): ")
    alphabet = sorted(set(tokens.word()))
    write(f"Alphabet: {_braced(alphabet)}\n")

    write("\nStep 2: Define States\n")
    while True:
        write("Enter number of states (minimum 1): ")
        count = tokens.integer()
        if count is not None and count >= 1:
            break
        write("Invalid input. Please enter a positive number.\n")
        tokens.drop_line()
    automaton = Automaton.numbered(count, alphabet)
    write(f"States: {_braced(automaton.states)}\n")
    write("Initial state is: q0\n")

    write("Enter the number of dead states: ")
    dead_count = tokens.integer() or 0
    if dead_count > 0:
        write(f"Enter the indices of dead states (0 to {count - 1}): ")
        for _ in range(dead_count):
            index = tokens.integer()
            if index is None or not 0 <= index < count:
                raise ValueError(f"Invalid state index: {index}")
            automaton.dead.add(automaton.states[index])
    dead = " ".join(sorted(automaton.dead)) + " " if automaton.dead else "None"
    write(f"Dead states: {dead}\n")

    write("\nStep 3: Define Accepting States\n")
    while True:
        write(f"Enter number of accepting states (0-{count}): ")
        wanted = tokens.integer()
        if wanted is not None and 0 <= wanted <= count:
            break
        write(f"Invalid input. Please enter a number between 0 and {count}.\n")
        tokens.drop_line()
    write(f"Enter state indices (0-{count - 1}) one per line:\n")
    while len(automaton.accepting) < wanted:
        index = tokens.integer()
        if index is None:
            write("Invalid input. Please enter a number.\n")
            tokens.drop_line()
            continue
        if not 0 <= index < count:
            write(f"Invalid index. Please enter a number between 0 and {count - 1}: ")
            continue
        state = automaton.states[index]
        if state in automaton.accepting:
            write(f"State {state} is already an accepting state. Enter a different state.\n")
            continue
        automaton.accepting.add(state)
    write(f"Accepting states: {_braced(sorted(automaton.accepting))}\n")

    write("\nStep 4: Define Transitions\n")
    write("For each state and symbol, enter the destination state index.\n")
    write("Enter -1 for transitions to a dead state.\n\n")
    for state in list(automaton.states):
        write(f"Transitions from state {state}:\n")
        for symbol in alphabet:
            while True:
                last = len(automaton.states) - 1
                write(f"  On symbol '{symbol}' goes to (enter 0-{last} or -1): ")
                index = tokens.integer()
                if index is None:
                    write("Invalid input. Please enter a number.\n")
                    tokens.drop_line()
                    continue
                if index != -1 and not 0 <= index <= last:
                    write(f"Invalid index. Please enter -1 or a number between 0 and {last}.\n")
                    continue
                if index == -1:
                    if SINK_STATE not in automaton.states:
                        automaton.add_dead_state(SINK_STATE)
                    target = SINK_STATE
                else:
                    target = automaton.states[index]
                automaton.set_transition(state, symbol, target)
                break
        write("\n")
    return automaton


def run(stdin: TextIO, stdout: TextIO) -> Automaton:
    """Run the interactive session and return the minimised automaton."""
    write = stdout.write
    write("DFA Minimization Tool\n")
    write("====================\n")

    automaton = read_automaton(stdin, stdout)
    write("\nOriginal DFA:\n" + automaton.format_table())
    write("\nMinimizing DFA...\n")

    if automaton.has_unreachable_states():
        write("Removing unreachable states...\n")
        automaton.remove_unreachable_states()
        remaining = "".join(f"{state} " for state in automaton.states)
        write(f"Removed unreachable states. Remaining states: {remaining}\n")
        write("\nDFA after removing unreachable states:\n" + automaton.format_table())
    else:
        write("No unreachable states found.\n")

    if automaton.complete():
        write(f"Added sink state '{SINK_STATE}' for undefined transitions.\n")
    write("\nMinimizing DFA using Hopcroft's algorithm...\n")
    minimized = automaton.minimize()
    if len(minimized.states) == len(automaton.states):
        write("The DFA is already minimized.\n")
    write("\nMinimized DFA:\n" + minimized.format_table())
    return minimized


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dfamin",
        description="Read a DFA interactively and print its minimised transition table.",
    )
    parser.parse_args(argv)
    try:
        run(sys.stdin, sys.stdout)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    except EOFError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())