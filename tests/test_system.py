import pytest

from fuzzynet.defuzzifiers import CenterOfGravity, DefuzzificationBlock
from fuzzynet.fuzzifiers import SingletonFuzzifier
from fuzzynet.inference import InferenceEngine
from fuzzynet.sets import GammaSet, LSet, TriangleSet
from fuzzynet.system import FuzzyLogicSystem
from fuzzynet.variables import Universe, Variable


def _variable(name):
    fuzzifier = SingletonFuzzifier(1, 0.01)
    fuzzifier.set_points(1)
    return Variable(
        name=name,
        range_min=-1,
        range_max=1,
        num_intervals=20,
        sets=[LSet(-1, -1, 0), TriangleSet(-1, 0, 1), GammaSet(0, 1, 1)],
        fuzzifier=fuzzifier,
    )


def _system():
    inputs = Universe([_variable("Entrada 1")])
    outputs = Universe([_variable("Salida 1")])
    engine = InferenceEngine(inputs, outputs, 3)
    for i in range(3):
        engine.rules[i].antecedent[0] = i
        engine.rules[i].consequent[0] = i
    block = DefuzzificationBlock(engine)
    block.add(CenterOfGravity(engine, 0, block.conjunction))
    return FuzzyLogicSystem(inputs, outputs, engine, block, name="demo")


def test_counts_and_names():
    system = _system()
    assert system.num_inputs == 1
    assert system.num_outputs == 1
    assert system.input_name(0) == "Entrada 1"
    assert system.output_name(0) == "Salida 1"


def test_variable_lookup():
    system = _system()
    assert system.input_variable(0) is system.inputs[0]
    assert system.output_variable(0) is system.outputs[0]
    assert system.input_variable(1) is None
    assert system.output_variable(3) is None


def test_compute_returns_one_value_per_output():
    system = _system()
    result = system.compute([0.0])
    assert len(result) == 1
    assert result[0] == pytest.approx(0.0, abs=1e-9)


def test_compute_is_monotone_across_extremes():
    system = _system()
    low = system.compute([-1.0])[0]
    mid = system.compute([0.0])[0]
    high = system.compute([1.0])[0]
    assert low < mid < high


def test_compute_rejects_missing_inputs():
    with pytest.raises(ValueError):
        _system().compute([])


def test_train_fixed_keeps_more_certain_rule():
    system = _system()
    system.train_fixed([0.5], [0.5])
    assert system.engine.num_rules == 3
    assert [rule.consequent[0] for rule in system.engine.rules] == [0, 1, 2]


def test_train_fixed_replaces_less_certain_rule():
    system = _system()
    system.engine.rules[1].certainty = 0.1
    system.train_fixed([0.0], [1.0])
    assert system.engine.num_rules == 3
    replaced = [rule for rule in system.engine.rules if rule.antecedent[0] == 1]
    assert len(replaced) == 1
    assert replaced[0].consequent[0] == 2
    assert replaced[0].certainty == pytest.approx(1.0)


def test_train_variable_adds_sets_and_rule():
    system = _system()
    system.train_variable([0.3], [0.7])
    assert len(system.inputs[0].sets) == 4
    assert len(system.outputs[0].sets) == 4
    last = system.engine.rules[-1]
    assert system.engine.num_rules == 4
    assert last.antecedent == [3]
    assert last.consequent == [3]