"""Finite automata with completion, reachability pruning and Hopcroft minimisation."""

from __future__ import annotations

import copy
import itertools
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

SINK_STATE = "qd"

_ARROW_WIDTH = 4
_STATE_WIDTH = 10
_TRANS_WIDTH = 10
_TABLE_HEADER = "================ Transition Table ================"
_TABLE_FOOTER = "================================================="


def set_to_state_name(states: Iterable[str]) -> str:
    """Render a collection of state names as a single name such as ``{q0,q1}``."""
    return "{" + ",".join(sorted(states)) + "}"


@dataclass
class Automaton:
    """A finite automaton whose transitions map (state, symbol) to a set of states."""

    alphabet: set[str] = field(default_factory=set)
    states: list[str] = field(default_factory=list)
    start_state: str = "q0"
    accepting: set[str] = field(default_factory=set)
    dead: set[str] = field(default_factory=set)
    transitions: dict[str, dict[str, set[str]]] = field(default_factory=dict)
    deterministic: bool = True

    @classmethod
    def numbered(cls, count: int, alphabet: Iterable[str]) -> Automaton:
        """Create an automaton with states ``q0`` .. ``q{count-1}`` and no transitions."""
        if count < 1:
            raise ValueError("an automaton needs at least one state")
        return cls(alphabet=set(alphabet), states=[f"q{i}" for i in range(count)])

    @property
    def symbols(self) -> list[str]:
        """The alphabet in sorted order."""
        return sorted(self.alphabet)

    def _targets(self, state: str, symbol: str) -> frozenset[str]:
        return frozenset(self.transitions.get(state, {}).get(symbol, ()))

    def _target(self, state: str, symbol: str) -> str | None:
        targets = self._targets(state, symbol)
        return min(targets) if targets else None

    def set_transition(self, state: str, symbol: str, target: str) -> None:
        """Make ``state`` go to exactly ``target`` on ``symbol``."""
        for name in (state, target):
            if name not in self.states:
                raise ValueError(f"unknown state: {name!r}")
        if symbol not in self.alphabet:
            raise ValueError(f"symbol not in alphabet: {symbol!r}")
        self.transitions.setdefault(state, {})[symbol] = {target}

    def add_dead_state(self, state: str) -> None:
        """Mark ``state`` as dead, adding it to the states if it is new."""
        if state not in self.states:
            self.states.append(state)
        self.dead.add(state)

    def apply_dead_state_logic(self) -> list[str]:
        """Strip dead states from the accepting set and make them loop on every symbol.

        Returns the dead states that were removed from the accepting set.
        """
        removed = sorted(self.dead & self.accepting)
        self.accepting -= self.dead
        for state in sorted(self.dead):
            row = self.transitions.setdefault(state, {})
            for symbol in self.alphabet:
                row[symbol] = {state}
        return removed

    def reachable_states(self) -> set[str]:
        """All states reachable from the start state."""
        reachable = {self.start_state}
        queue = deque([self.start_state])
        while queue:
            current = queue.popleft()
            for symbol in self.symbols:
                for nxt in self._targets(current, symbol):
                    if nxt not in reachable:
                        reachable.add(nxt)
                        queue.append(nxt)
        return reachable

    def has_unreachable_states(self) -> bool:
        """Whether some state cannot be reached from the start state."""
        return len(self.reachable_states()) != len(self.states)

    def remove_unreachable_states(self) -> list[str]:
        """Drop every unreachable state and its transitions; return the dropped states."""
        reachable = self.reachable_states()
        removed = [s for s in self.states if s not in reachable]
        self.states = [s for s in self.states if s in reachable]
        self.accepting &= reachable
        self.dead &= reachable

        pruned: dict[str, dict[str, set[str]]] = {}
        for state, row in self.transitions.items():
            if state not in reachable:
                continue
            for symbol, targets in row.items():
                kept = targets & reachable
                if kept:
                    pruned.setdefault(state, {})[symbol] = set(kept)
        self.transitions = pruned
        return removed

    def complete(self) -> bool:
        """Send every undefined transition to a sink state.

        Returns True when a sink state was needed.
        """
        needed = any(
            not self._targets(state, symbol)
            for state in self.states
            for symbol in self.alphabet
        )
        if not needed:
            return False
        if SINK_STATE not in self.states:
            self.states.append(SINK_STATE)
        sink_row = self.transitions.setdefault(SINK_STATE, {})
        for symbol in self.alphabet:
            sink_row.setdefault(symbol, set()).add(SINK_STATE)
        for state in self.states:
            row = self.transitions.setdefault(state, {})
            for symbol in self.alphabet:
                if not row.get(symbol):
                    row[symbol] = {SINK_STATE}
        return True

    def is_dfa(self) -> bool:
        """Whether the automaton is deterministic."""
        return self.deterministic

    def _refine(self) -> list[frozenset[str]]:
        final = frozenset(self.accepting)
        non_final = frozenset(s for s in self.states if s not in self.accepting)
        partitions = [block for block in (final, non_final) if block]

        work: list[frozenset[str]] = []
        if final and len(final) <= len(non_final):
            work.append(final)
        elif non_final:
            work.append(non_final)

        while work:
            splitter = work.pop()
            for symbol in self.symbols:
                predecessors = {
                    s for s in self.states if self._target(s, symbol) in splitter
                }
                refined: list[frozenset[str]] = []
                for block in partitions:
                    inside = block & predecessors
                    outside = block - predecessors
                    if not inside or not outside:
                        refined.append(block)
                        continue
                    refined += [inside, outside]
                    if block in work:
                        work.remove(block)
                        work += [inside, outside]
                    else:
                        work.append(inside if len(inside) <= len(outside) else outside)
                partitions = refined
        return partitions

    def minimize(self) -> Automaton:
        """Return the minimal equivalent DFA, completing this one first.

        When the automaton is already minimal, a copy of it is returned;
        otherwise the states are named ``Q0`` (start) , ``Q1``, ...
        """
        self.complete()
        partitions = self._refine()
        if len(partitions) == len(self.states):
            return copy.deepcopy(self)

        start_index = next(
            (i for i, block in enumerate(partitions) if self.start_state in block), None
        )
        if start_index is None:
            raise ValueError(f"start state {self.start_state!r} is not a state")

        counter = itertools.count(1)
        names = [
            "Q0" if i == start_index else f"Q{next(counter)}"
            for i, _ in enumerate(partitions)
        ]
        renamed = {state: name for name, block in zip(names, partitions) for state in block}

        minimized = Automaton(alphabet=set(self.alphabet), states=list(names), start_state="Q0")
        for name, block in zip(names, partitions):
            if block & self.accepting:
                minimized.accepting.add(name)
            if block <= self.dead:
                minimized.dead.add(name)
            representative = min(block)
            row = minimized.transitions.setdefault(name, {})
            for symbol in self.alphabet:
                row[symbol] = {renamed[self._target(representative, symbol)]}
        return minimized

    def format_table(self, title: str = "Transition Table") -> str:
        """Render the transition table as text."""
        symbols = self.symbols
        lines = [title, _TABLE_HEADER]
        lines.append(
            " ".ljust(_ARROW_WIDTH)
            + "State".ljust(_STATE_WIDTH)
            + "".join(symbol.ljust(_TRANS_WIDTH) for symbol in symbols)
        )
        lines.append("-" * (_ARROW_WIDTH + _STATE_WIDTH + len(symbols) * _TRANS_WIDTH))

        ordered = list(self.states)
        if ordered and ordered[0].startswith("Q"):
            ordered.sort(key=lambda name: int(name[1:]))

        for state in ordered:
            marker = "->" if state == self.start_state else "  "
            label = state + "+" if state in self.accepting else state
            cells = []
            for symbol in symbols:
                targets = self._targets(state, symbol)
                if not targets:
                    cells.append("-")
                elif len(targets) == 1:
                    cells.append(next(iter(targets)))
                else:
                    cells.append(set_to_state_name(targets))
            lines.append(
                marker.ljust(_ARROW_WIDTH)
                + label.ljust(_STATE_WIDTH)
                + "".join(cell.ljust(_TRANS_WIDTH) for cell in cells)
            )
        lines.append(_TABLE_FOOTER)
        return "\n".join(lines) + "\n"