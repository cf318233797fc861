"""Layered networks of fuzzy logic systems connected through pins."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .system import FuzzyLogicSystem


@dataclass(eq=False)
class Pin:
    """A connection point holding a value.

    An input pin may be wired to the output pin of a node in the previous
    layer through ``contact``; it then copies that pin's value.
    """

    contact: Pin | None = field(default=None, repr=False)
    value: float = 0.0


@dataclass(eq=False)
class Node:
    """A fuzzy logic system together with one pin per input and output."""

    system: FuzzyLogicSystem | None = None
    inputs: list[Pin] = field(default_factory=list)
    outputs: list[Pin] = field(default_factory=list)

    def _require_system(self) -> FuzzyLogicSystem:
        if self.system is None:
            raise ValueError("node has no fuzzy logic system")
        return self.system

    def compute_node(self) -> None:
        """Pull connected inputs, evaluate the system and store the outputs."""
        self.update_inputs()
        results = self.compute([pin.value for pin in self.inputs])
        for pin, value in zip(self.outputs, results):
            pin.value = value

    def update_inputs(self) -> None:
        """Copy the value of each connected output pin into its input pin."""
        for pin in self.inputs:
            if pin.contact is not None:
                pin.value = pin.contact.value

    def compute(self, inputs: Sequence[float]) -> list[float]:
        """Crisp outputs of the node's system for the crisp *inputs*."""
        return self._require_system().compute(inputs)

    def fit_pins_to_system(self) -> None:
        """Add or drop pins so that they match the system's inputs and outputs."""
        system = self._require_system()
        while len(self.inputs) < system.num_inputs:
            self.inputs.append(Pin())
        while len(self.outputs) < system.num_outputs:
            self.outputs.append(Pin())
        del self.inputs[system.num_inputs :]
        del self.outputs[system.num_outputs :]


@dataclass(eq=False)
class Layer:
    """A column of nodes evaluated together."""

    nodes: list[Node] = field(default_factory=list)


@dataclass
class Network:
    """Layers of nodes; inputs of a layer connect to outputs of the layer before."""

    layers: list[Layer] = field(default_factory=list)

    def connect(
        self, layer1: int, node1: int, pin1: int, layer2: int, node2: int, pin2: int
    ) -> bool:
        """Wire output *pin1* of a node to input *pin2* of a node in the next layer.

        Returns False, changing nothing, when the layers are not adjacent or a
        pin does not exist.
        """
        if layer1 < 0 or layer1 != layer2 - 1:
            return False
        source = self.output_pin(layer1, node1, pin1)
        target = self.input_pin(layer2, node2, pin2)
        if source is None or target is None:
            return False
        target.contact = source
        return True

    def has_layer(self, layer: int) -> bool:
        """Whether layer index *layer* exists."""
        return 0 <= layer < len(self.layers)

    def has_node(self, layer: int, node: int) -> bool:
        """Whether node *node* of layer *layer* exists."""
        return self.has_layer(layer) and 0 <= node < len(self.layers[layer].nodes)

    def has_input_pin(self, layer: int, node: int, pin: int) -> bool:
        """Whether the given input pin exists."""
        return (
            self.has_node(layer, node)
            and 0 <= pin < len(self.layers[layer].nodes[node].inputs)
        )

    def has_output_pin(self, layer: int, node: int, pin: int) -> bool:
        """Whether the given output pin exists."""
        return (
            self.has_node(layer, node)
            and 0 <= pin < len(self.layers[layer].nodes[node].outputs)
        )

    def input_pin_value(self, layer: int, node: int, pin: int) -> float:
        """Value of an input pin, or 0.0 when it does not exist."""
        found = self.input_pin(layer, node, pin)
        return found.value if found is not None else 0.0

    def output_pin_value(self, layer: int, node: int, pin: int) -> float:
        """Value of an output pin, or 0.0 when it does not exist."""
        found = self.output_pin(layer, node, pin)
        return found.value if found is not None else 0.0

    def set_input(self, node: int, pin: int, value: float) -> None:
        """Set an input pin of the first layer; missing pins are ignored."""
        found = self.input_pin(0, node, pin)
        if found is not None:
            found.value = value

    def node(self, layer: int, node: int) -> Node | None:
        """The node at the given position, or None."""
        if not self.has_node(layer, node):
            return None
        return self.layers[layer].nodes[node]

    def input_pin(self, layer: int, node: int, pin: int) -> Pin | None:
        """The input pin at the given position, or None."""
        if not self.has_input_pin(layer, node, pin):
            return None
        return self.layers[layer].nodes[node].inputs[pin]

    def output_pin(self, layer: int, node: int, pin: int) -> Pin | None:
        """The output pin at the given position, or None."""
        if not self.has_output_pin(layer, node, pin):
            return None
        return self.layers[layer].nodes[node].outputs[pin]

    def _all_input_pins(self):
        for current in self.layers:
            for member in current.nodes:
                yield from member.inputs

    def disconnect_output(self, layer: int, node: int, pin: int) -> None:
        """Detach every input pin wired to the given output pin."""
        source = self.output_pin(layer, node, pin)
        if source is None:
            return
        for target in self._all_input_pins():
            if target.contact is source:
                target.contact = None

    def disconnect_node_inputs(self, layer: int, node: int) -> None:
        """Detach all input pins of a node."""
        found = self.node(layer, node)
        if found is None:
            return
        for pin in found.inputs:
            pin.contact = None

    def disconnect_node_outputs(self, layer: int, node: int) -> None:
        """Detach every input pin wired to any output of a node."""
        found = self.node(layer, node)
        if found is None:
            return
        for index in range(len(found.outputs)):
            self.disconnect_output(layer, node, index)

    def remove_node(self, layer: int, node: int) -> None:
        """Disconnect and remove a node; missing nodes are ignored."""
        if not self.has_node(layer, node):
            return
        self.disconnect_node_inputs(layer, node)
        self.disconnect_node_outputs(layer, node)
        del self.layers[layer].nodes[node]

    def remove_layer(self, layer: int) -> None:
        """Remove a layer and all its nodes; missing layers are ignored."""
        if not self.has_layer(layer):
            return
        while self.layers[layer].nodes:
            self.remove_node(layer, 0)
        del self.layers[layer]

    def remove_layers(self) -> None:
        """Remove every layer."""
        while self.layers:
            self.remove_layer(0)

    def add_layer(self) -> Layer:
        """Append an empty layer and return it."""
        new_layer = Layer()
        self.layers.append(new_layer)
        return new_layer

    def add_node(self, layer: int) -> Node | None:
        """Append an empty node to *layer* and return it, or None if no such layer."""
        if not self.has_layer(layer):
            return None
        new_node = Node()
        self.layers[layer].nodes.append(new_node)
        return new_node

    def locate_input_pin(self, pin: Pin | None) -> tuple[int, int, int] | None:
        """(layer, node, pin) indices of an input pin, or None if it is not here."""
        if pin is None:
            return None
        for i, current in enumerate(self.layers):
            for j, member in enumerate(current.nodes):
                for k, candidate in enumerate(member.inputs):
                    if candidate is pin:
                        return i, j, k
        return None

    def locate_output_pin(self, pin: Pin | None) -> tuple[int, int, int] | None:
        """(layer, node, pin) indices of an output pin, or None if it is not here."""
        if pin is None:
            return None
        for i, current in enumerate(self.layers):
            for j, member in enumerate(current.nodes):
                for k, candidate in enumerate(member.outputs):
                    if candidate is pin:
                        return i, j, k
        return None

    def num_inputs(self) -> int:
        """Number of input pins in the first layer."""
        if not self.layers:
            return 0
        return sum(len(member.inputs) for member in self.layers[0].nodes)

    def num_outputs(self) -> int:
        """Number of output pins in the last layer."""
        if not self.layers:
            return 0
        return sum(len(member.outputs) for member in self.layers[-1].nodes)

    def assign_inputs(self, values: Sequence[float]) -> None:
        """Set the first layer's input pins, node by node, from *values*."""
        if not self.layers:
            return
        pins = [pin for member in self.layers[0].nodes for pin in member.inputs]
        if len(values) < len(pins):
            raise ValueError(f"expected {len(pins)} input values, got {len(values)}")
        for pin, value in zip(pins, values):
            pin.value = value

    def read_outputs(self) -> list[float]:
        """Values of the last layer's output pins, node by node."""
        if not self.layers:
            return []
        return [pin.value for member in self.layers[-1].nodes for pin in member.outputs]

    def compute_network(self) -> None:
        """Evaluate every node, layer by layer."""
        for current in self.layers:
            for member in current.nodes:
                member.compute_node()

    def compute(self, values: Sequence[float]) -> list[float]:
        """Assign *values* to the inputs, evaluate and return the outputs."""
        self.assign_inputs(values)
        self.compute_network()
        return self.read_outputs()