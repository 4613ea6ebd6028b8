import re

import pytest

from marketgraph.cli import main, run_demo

_NUMBER = r"-?\d+\.\d+"


def _floats(text):
    return [float(value) for value in re.findall(_NUMBER, text)]


def _lines_starting(report, prefix):
    return [line for line in report.splitlines() if line.startswith(prefix)]


@pytest.fixture(scope="module")
def report():
    return run_demo()


def test_normalized_scores_line(report):
    first = report.splitlines()[0]
    assert first.startswith("norm ec: [")
    scores = _floats(first)
    assert len(scores) == 5
    assert max(scores) == pytest.approx(1.0)
    assert scores.index(max(scores)) == 1
    expected = [0.991025, 1.0, 0.184878, 0.152143, 0.127192]
    assert scores == pytest.approx(expected, abs=1e-6)


def test_initial_state_of_producer(report):
    (weight_line,) = _lines_starting(report, "weight:")
    assert _floats(weight_line) == pytest.approx([5.5])

    (ec_line,) = _lines_starting(report, "ec:")
    assert _floats(ec_line) == pytest.approx([0.088713, 0.127192], abs=1e-6)

    value_lines = _lines_starting(report, "graph value:")
    assert _floats(value_lines[0]) == pytest.approx([0.014996], abs=1e-6)


def test_transactions_name_buyers_in_order(report):
    headers = _lines_starting(report, "--- Transaction")
    assert len(headers) == 3
    buyers = [int(re.search(r"buyer (\d+)", header).group(1)) for header in headers]
    assert buyers == [2, 3, 1]
    assert all("producer 4" in header for header in headers)


def test_buyer_graph_values(report):
    lines = _lines_starting(report, "buyer ")
    values = [_floats(line)[-1] for line in lines]
    assert values == pytest.approx([0.026227, 0.018433, 2.45], abs=1e-6)


def test_reputation_changes_chain_together(report):
    lines = [line for line in _lines_starting(report, "reputation:") if "->" in line]
    assert len(lines) == 3
    steps = [_floats(line) for line in lines]
    for before, after, delta in steps:
        assert delta == pytest.approx(after - before, abs=2e-6)
    for (_, after, _), (before, _, _) in zip(steps, steps[1:]):
        assert before == after
    assert steps[0][0] == pytest.approx(0.1)
    assert steps[-1][1] == pytest.approx(4.157766, abs=1e-6)
    assert "\u0394" in lines[0]


def test_graph_value_changes_chain_together(report):
    lines = [line for line in _lines_starting(report, "graph value:") if "->" in line]
    steps = [_floats(line) for line in lines]
    assert len(steps) == 3
    for (_, after), (before, _) in zip(steps, steps[1:]):
        assert before == after
    assert steps[-1][1] == pytest.approx(0.623482, abs=1e-6)


def test_main_prints_report(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == run_demo() + "\n"


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2