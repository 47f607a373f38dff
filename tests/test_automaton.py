import itertools

import pytest

from dfamin.automaton import SINK_STATE, Automaton, set_to_state_name


def build(count, alphabet, edges, accepting=()):
    automaton = Automaton.numbered(count, alphabet)
    for (src, symbol), dst in edges.items():
        automaton.set_transition(f"q{src}", symbol, f"q{dst}")
    automaton.accepting.update(f"q{i}" for i in accepting)
    return automaton


def accepts(automaton, word):
    state = automaton.start_state
    for symbol in word:
        (state,) = automaton.transitions[state][symbol]
    return state in automaton.accepting


def words(alphabet, max_len):
    for length in range(max_len + 1):
        yield from ("".join(p) for p in itertools.product(sorted(alphabet), repeat=length))


@pytest.fixture
def textbook():
    edges = {
        (0, "a"): 1, (0, "b"): 2,
        (1, "a"): 1, (1, "b"): 3,
        (2, "a"): 1, (2, "b"): 2,
        (3, "a"): 1, (3, "b"): 4,
        (4, "a"): 1, (4, "b"): 2,
    }
    return build(5, "ab", edges, accepting=[4])


def test_set_to_state_name_sorts_and_joins():
    assert set_to_state_name({"q2", "q0", "q1"}) == "{q0,q1,q2}"
    assert set_to_state_name(set()) == "{}"


def test_numbered_creates_sequential_states():
    automaton = Automaton.numbered(3, "ba")
    assert automaton.states == ["q0", "q1", "q2"]
    assert automaton.start_state == "q0"
    assert automaton.alphabet == {"a", "b"}
    assert automaton.is_dfa() is True


def test_numbered_rejects_zero_states():
    with pytest.raises(ValueError):
        Automaton.numbered(0, "a")


@pytest.mark.parametrize("state,symbol,target", [("q9", "a", "q0"), ("q0", "z", "q0"), ("q0", "a", "q9")])
def test_set_transition_rejects_unknown(state, symbol, target):
    automaton = Automaton.numbered(2, "a")
    with pytest.raises(ValueError):
        automaton.set_transition(state, symbol, target)


def test_set_transition_replaces_previous_target():
    automaton = Automaton.numbered(2, "a")
    automaton.set_transition("q0", "a", "q0")
    automaton.set_transition("q0", "a", "q1")
    assert automaton.transitions["q0"]["a"] == {"q1"}


def test_add_dead_state_appends_new_state():
    automaton = Automaton.numbered(1, "a")
    automaton.add_dead_state(SINK_STATE)
    automaton.add_dead_state(SINK_STATE)
    assert automaton.states == ["q0", SINK_STATE]
    assert automaton.dead == {SINK_STATE}


def test_complete_adds_sink_for_missing_transitions():
    automaton = build(2, "ab", {(0, "a"): 1, (1, "a"): 1, (1, "b"): 0})
    assert automaton.complete() is True
    assert SINK_STATE in automaton.states
    assert automaton.transitions["q0"]["b"] == {SINK_STATE}
    assert automaton.transitions[SINK_STATE] == {"a": {SINK_STATE}, "b": {SINK_STATE}}
    assert all(automaton.transitions[s][c] for s in automaton.states for c in "ab")
    assert automaton.complete() is False


def test_complete_is_noop_on_total_automaton(textbook):
    before = list(textbook.states)
    assert textbook.complete() is False
    assert textbook.states == before


def test_remove_unreachable_states():
    automaton = build(3, "a", {(0, "a"): 1, (1, "a"): 0, (2, "a"): 0}, accepting=[1, 2])
    automaton.add_dead_state("q2")
    assert automaton.reachable_states() == {"q0", "q1"}
    assert automaton.has_unreachable_states() is True
    assert automaton.remove_unreachable_states() == ["q2"]
    assert automaton.states == ["q0", "q1"]
    assert automaton.accepting == {"q1"}
    assert automaton.dead == set()
    assert "q2" not in automaton.transitions
    assert automaton.has_unreachable_states() is False


def test_minimize_textbook_example(textbook):
    minimized = textbook.minimize()
    assert len(minimized.states) == 4
    assert minimized.start_state == "Q0"
    for word in words("ab", 6):
        assert accepts(minimized, word) == accepts(textbook, word)


def test_minimize_is_idempotent(textbook):
    once = textbook.minimize()
    twice = once.minimize()
    assert len(twice.states) == len(once.states)
    assert twice == once


def test_minimize_already_minimal_returns_copy():
    automaton = build(2, "a", {(0, "a"): 1, (1, "a"): 0}, accepting=[1])
    result = automaton.minimize()
    assert result == automaton
    assert result is not automaton


def test_minimize_merges_all_accepting_states():
    automaton = build(3, "a", {(0, "a"): 1, (1, "a"): 2, (2, "a"): 0}, accepting=[0, 1, 2])
    minimized = automaton.minimize()
    assert minimized.states == ["Q0"]
    assert minimized.accepting == {"Q0"}
    assert minimized.transitions["Q0"]["a"] == {"Q0"}


def test_minimize_completes_partial_automaton_first():
    automaton = build(2, "ab", {(0, "a"): 1, (1, "a"): 1}, accepting=[1])
    minimized = automaton.minimize()
    assert SINK_STATE in automaton.states
    for word in words("ab", 5):
        assert accepts(minimized, word) == accepts(automaton, word)


def test_minimize_marks_blocks_of_dead_states():
    automaton = build(3, "a", {(0, "a"): 1, (1, "a"): 2, (2, "a"): 2}, accepting=[0])
    automaton.add_dead_state("q1")
    automaton.add_dead_state("q2")
    minimized = automaton.minimize()
    others = {name for name in minimized.states if name != minimized.start_state}
    assert minimized.dead == others
    assert minimized.accepting == {minimized.start_state}


def test_apply_dead_state_logic():
    automaton = build(2, "ab", {(0, "a"): 1, (0, "b"): 0, (1, "a"): 0, (1, "b"): 0}, accepting=[0, 1])
    automaton.add_dead_state("q1")
    assert automaton.apply_dead_state_logic() == ["q1"]
    assert automaton.accepting == {"q0"}
    assert automaton.transitions["q1"] == {"a": {"q1"}, "b": {"q1"}}


def test_format_table_layout(textbook):
    lines = textbook.format_table("Title").splitlines()
    assert lines[0] == "Title"
    assert lines[1] == "================ Transition Table ================"
    assert lines[2].split() == ["State", "a", "b"]
    assert set(lines[3]) == {"-"}
    assert len(lines[3]) == len(lines[2])
    assert lines[4].startswith("->")
    assert lines[4][4:14].strip() == "q0"
    assert any(line[4:14].strip() == "q4+" for line in lines)
    assert set(lines[-1]) == {"="}


def test_format_table_orders_minimized_states_numerically():
    automaton = Automaton(alphabet={"a"}, states=["Q10", "Q2", "Q0"], start_state="Q0")
    rows = automaton.format_table("T").splitlines()[4:-1]
    assert [row[4:14].strip() for row in rows] == ["Q0", "Q2", "Q10"]


def test_format_table_shows_missing_and_multiple_targets():
    automaton = Automaton.numbered(2, "ab")
    automaton.transitions["q0"] = {"a": {"q0", "q1"}}
    rows = automaton.format_table("T").splitlines()[4:-1]
    assert rows[0].split() == ["->", "q0", set_to_state_name({"q0", "q1"}), "-"]
    assert rows[1].split() == ["q1", "-", "-"]