# dfamin

`dfamin` minimizes deterministic finite automata. It uses Hopcroft's partition refinement algorithm.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Command line

```
dfamin
```

The command takes no options apart from `--help`. It reads its answers from standard input, one item at a time:

1. **Alphabet**: the symbols as one word. For example, `ab` gives the alphabet `{a,b}`.
2. **Number of states**: this must be at least 1. States are named `q0`, `q1`, and so on. `q0` is the start state.
3. **Dead states**: how many there are, then their indices. An index out of range ends the program with exit status 1.
4. **Accepting states**: how many there are, then their indices. A repeated or out-of-range index is rejected, and you are asked again.
5. **Transitions**: the destination index for each state and symbol, with the symbols in sorted order. Enter `-1` to send the transition to the dead state `qd`. The first time you do this, `qd` is added.

If input ends before every answer has been given, the program exits with status 1.

The tool then does these steps in order:

1. It prints the original transition table.
2. It removes unreachable states, if there are any, and prints the table again.
3. It completes the automaton. Any transition that is still missing goes to a sink state `qd`.
4. It prints the minimized table. If no two states could be merged, it says that the DFA is already minimized and prints the table unchanged.

When states are merged, the block that holds the start state is named `Q0`. The other blocks are named `Q1`, `Q2`, and so on. In each table:

- `->` marks the start state.
- `+` marks an accepting state.
- `-` marks a missing transition.

## Library

```python
from dfamin.automaton import Automaton

dfa = Automaton.numbered(3, "ab")
dfa.set_transition("q0", "a", "q1")
dfa.set_transition("q0", "b", "q2")
dfa.set_transition("q1", "a", "q1")
dfa.set_transition("q1", "b", "q1")
dfa.set_transition("q2", "a", "q2")
dfa.set_transition("q2", "b", "q2")
dfa.accepting.update({"q1", "q2"})

if dfa.has_unreachable_states():
    dfa.remove_unreachable_states()

minimal = dfa.minimize()
print(minimal.format_table("Minimized DFA"))
```

`Automaton` is a dataclass. It has these fields:

- `alphabet`
- `states`
- `start_state`
- `accepting`
- `dead`
- `transitions`
- `deterministic`

It has these methods:

- `numbered(count, alphabet)`: builds states `q0` to `q{count-1}` with no transitions. It raises `ValueError` if `count` is below 1.
- `set_transition(state, symbol, target)`: sets a transition. It raises `ValueError` for an unknown state or a symbol that is not in the alphabet.
- `add_dead_state(state)`: marks a state as dead, and adds it to the states if it is new.
- `apply_dead_state_logic()`: removes dead states from the accepting set and makes every dead state loop to itself on each symbol. It returns the states it removed from the accepting set.
- `reachable_states()` and `has_unreachable_states()`.
- `remove_unreachable_states()`: returns the states it dropped.
- `complete()`: returns `True` when a sink state `qd` was needed.
- `minimize()`: completes the automaton first, then returns a new `Automaton`. If no two states can be merged, the result is a copy of the original.
- `format_table(title)`: returns the transition table as text.
- `is_dfa()`: returns the `deterministic` flag.

`set_to_state_name(states)` renders a set of states as a single name, such as `{q0,q1}`.

You can drive the interactive session from any pair of text streams:

- `dfamin.cli.run(stdin, stdout)` runs the whole session and returns the minimized automaton.
- `dfamin.cli.read_automaton(stdin, stdout)` reads the automaton only.

## Limitations

- Input comes only from the interactive prompts or from code. There is no file format for loading or saving automata.
- Nondeterministic automata are not converted to deterministic ones, and determinism is not checked. `is_dfa()` only reports the `deterministic` field. Minimization assumes that each transition has a single target.