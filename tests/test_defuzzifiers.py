import pytest

from fuzzynet.defuzzifiers import (
    CenterOfGravity,
    DefuzzificationBlock,
    FirstMaximum,
    Height,
    LastMaximum,
    MeanOfMaxima,
)
from fuzzynet.fuzzifiers import SingletonFuzzifier
from fuzzynet.inference import InferenceEngine
from fuzzynet.norms import Maximum, Minimum
from fuzzynet.sets import GammaSet, LSet, TriangleSet
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


def _engine():
    engine = InferenceEngine(
        Universe([_variable("Entrada 1")]), Universe([_variable("Salida 1")]), 3
    )
    for i in range(3):
        engine.rules[i].antecedent[0] = i
        engine.rules[i].consequent[0] = i
    return engine


@pytest.mark.parametrize("cls", [FirstMaximum, LastMaximum, MeanOfMaxima, CenterOfGravity, Height])
def test_centered_input_gives_centered_output(cls):
    defuzzifier = cls(_engine(), 0, Maximum())
    assert defuzzifier.crisp_output([0.0]) == pytest.approx(0.0, abs=1e-9)


def test_center_of_gravity_is_antisymmetric():
    defuzzifier = CenterOfGravity(_engine(), 0, Maximum())
    high = defuzzifier.crisp_output([1.0])
    low = defuzzifier.crisp_output([-1.0])
    assert high > 0
    assert high == pytest.approx(-low, rel=1e-9)
    assert -1 <= low <= 1


def test_maxima_at_extreme_input():
    engine = _engine()
    assert FirstMaximum(engine, 0).crisp_output([1.0]) == pytest.approx(1.0, abs=1e-9)
    assert LastMaximum(engine, 0).crisp_output([-1.0]) == pytest.approx(-1.0, abs=1e-9)


def test_height_uses_consequent_height_center():
    defuzzifier = Height(_engine(), 0, Maximum())
    assert defuzzifier.crisp_output([1.0]) == pytest.approx(1.0)


def test_no_active_rule_uses_range_limits():
    engine = _engine()
    assert FirstMaximum(engine, 0).crisp_output([5.0]) == -1
    assert LastMaximum(engine, 0).crisp_output([5.0]) == pytest.approx(1.0)
    assert MeanOfMaxima(engine, 0).crisp_output([5.0]) == pytest.approx(0.0, abs=1e-9)
    assert CenterOfGravity(engine, 0).crisp_output([5.0]) == 0.0
    assert Height(engine, 0).crisp_output([5.0]) == 0.0


def test_default_follows_implication():
    engine = _engine()
    defuzzifier = CenterOfGravity(engine, 0)
    assert defuzzifier.default() == engine.implication.default()


def test_identifiers_are_distinct():
    engine = _engine()
    ids = [
        FirstMaximum(engine, 0).identifier,
        LastMaximum(engine, 0).identifier,
        MeanOfMaxima(engine, 0).identifier,
        CenterOfGravity(engine, 0).identifier,
        Height(engine, 0).identifier,
    ]
    assert ids == [0, 1, 2, 3, 4]


def test_block_computes_every_output():
    engine = _engine()
    block = DefuzzificationBlock(engine)
    block.add(CenterOfGravity(engine, 0, block.conjunction))
    outputs = block.crisp_outputs([1.0])
    assert len(outputs) == engine.num_outputs
    assert outputs[0] == block.crisp_output(0, [1.0])


def test_block_set_conjunction_reaches_defuzzifiers():
    engine = _engine()
    block = DefuzzificationBlock(engine)
    block.add(CenterOfGravity(engine, 0))
    norm = Minimum()
    block.set_conjunction(norm)
    assert block.conjunction is norm
    assert block[0].conjunction is norm


def test_block_set_engine_reaches_defuzzifiers():
    block = DefuzzificationBlock(_engine())
    block.add(FirstMaximum(block.engine, 0))
    other = _engine()
    block.set_engine(other)
    assert block.engine is other
    assert block[0].engine is other


def test_block_remove_and_clear():
    engine = _engine()
    block = DefuzzificationBlock(engine)
    block.add(FirstMaximum(engine, 0))
    block.add(LastMaximum(engine, 0))
    block.remove(0)
    assert isinstance(block[0], LastMaximum)
    block.clear()
    assert len(block) == 0
    with pytest.raises(IndexError):
        block.crisp_output(0, [0.0])