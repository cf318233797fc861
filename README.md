# fuzzynet

Fuzzy logic systems, and layered networks built from them, in plain Python
with no third-party dependencies.

## Building blocks

| Module | Contents |
| --- | --- |
| `fuzzynet.sets` | Fuzzy sets: `LSet`, `TriangleSet`, `PiSet`, `GammaSet`, `ZSet`, `BellSet`, `SSet`, `PiBellSet`, `SingletonSet` (all `FuzzySet`s with `membership`, `key_points`, `set_key_point`, `height_center`) |
| `fuzzynet.fuzzifiers` | Input fuzzifiers that follow a crisp value: `TriangleFuzzifier`, `PiFuzzifier`, `BellFuzzifier`, `PiBellFuzzifier`, `SingletonFuzzifier` (`move_to`, `set_points`, `set_width`) |
| `fuzzynet.norms` | T-norms `Product`, `Minimum`, `BoundedProduct`, `DrasticProduct`, `FamilyTp`, `FamilyHp`, `FamilyFp`, `FamilyYp`, `FamilyAp`; S-norms `Maximum`, `BoundedSum`, `DrasticSum`, `FamilySp` |
| `fuzzynet.implications` | `ProductImplication`, `MinimumImplication`, `KleeneDienesImplication`, `LukasiewiczImplication`, `ZadehImplication`, `StochasticImplication`, `GoguenImplication`, `GodelImplication`, `SharpImplication` |
| `fuzzynet.variables` | `Variable` (name, range, number of intervals, sets, fuzzifier) and `Universe` (an ordered list of variables) |
| `fuzzynet.rules` | `Rule`: antecedent and consequent set indices, modifiers and certainty |
| `fuzzynet.inference` | `InferenceEngine`: the rule base, the implication and the AND and composition norms |
| `fuzzynet.defuzzifiers` | `FirstMaximum`, `LastMaximum`, `MeanOfMaxima`, `CenterOfGravity`, `Height`, and `DefuzzificationBlock` holding one defuzzifier per output |
| `fuzzynet.system` | `FuzzyLogicSystem`: universes, engine and defuzzification block together; `compute(inputs)` returns the crisp outputs |
| `fuzzynet.network` | `Pin`, `Node`, `Layer` and `Network` for wiring systems together |
| `fuzzynet.example` | `build_example_system()` and the interactive `main` |

A `Variable` gets a `TriangleFuzzifier(0.0, 0.1, 0.1)` unless another
fuzzifier is given. An `InferenceEngine` starts with `MinimumImplication`,
`Minimum` for AND and min-composition, and `Maximum` for max-composition;
each of these attributes can be replaced.

## Learning rules from data

- `FuzzyLogicSystem.train_fixed(antecedent, consequent)` builds a rule from
  the sets with the highest membership for the example. If a rule with the
  same antecedent already exists, the new rule replaces it only when its
  certainty is higher.
- `FuzzyLogicSystem.train_variable(antecedent, consequent)` adds to every
  variable a copy of its first set, shifted so that its height centre lies on
  the example value, and adds a rule that uses those new sets.

## Networks

A `Network` is a list of `Layer`s, each a list of `Node`s. A node holds a
`FuzzyLogicSystem` and one `Pin` per input and output; call
`Node.fit_pins_to_system()` after setting its system. `Network.connect`
wires an output pin of one layer to an input pin of the next and returns
`False` when the layers are not adjacent or a pin does not exist.
`Network.compute(values)` assigns the first layer's input pins, evaluates
every node layer by layer and returns the last layer's output pin values.

```python
from fuzzynet.example import build_example_system
from fuzzynet.network import Network

net = Network()
for _ in range(2):
    layer = net.add_layer()
for index in range(2):
    node = net.add_node(index)
    node.system = build_example_system()
    node.fit_pins_to_system()
net.connect(0, 0, 0, 1, 0, 0)
print(net.compute([0.5]))
```

## A worked example

`fuzzynet.example.build_example_system()` returns a one-input, one-output
system over the range -1 to 1 ("Entrada 1" and "Salida 1") with three sets
per variable, a singleton fuzzifier, three rules mapping each input set to
the matching output set, and a centre-of-gravity defuzzifier:

```python
from fuzzynet.example import build_example_system

system = build_example_system()
print(system.input_name(0), "->", system.output_name(0))
print(system.compute([0.5]))
```

The same system can be tried from a terminal. The command asks for each input
value, prints each output, then asks `Another calculation? (y/n)`; any answer
other than `y`, or the end of input, stops it:

```
fuzzynet-example
```

## What the package does not do

Systems and networks are built in Python code only. The package does not
save them to or load them from files, does not generate source code from a
system, and has no graphical editor or plotting of membership functions.

## Installation

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```