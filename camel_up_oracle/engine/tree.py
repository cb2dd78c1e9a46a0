"""Exhaustive game tree for the remainder of a leg.

Every ordered sequence of (camel, face) draws gets its own leaf, so the tree
holds exactly ``n! * 3**n`` leaves for ``n`` dice and every leaf is equally
likely. Leaves that end in the same race are deliberately kept apart; merging
them would change the weighting.

Growth is factorial times exponential: five dice give 29,160 leaves, which is
why pools larger than `MAX_DICE` are refused outright.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Final

from camel_up_oracle.core.exceptions import ScalingLimitError
from camel_up_oracle.core.types import CAMELS, FACES
from camel_up_oracle.engine.dice import Dice
from camel_up_oracle.engine.race import Race, Roll

logger = logging.getLogger("camel_up.tree")

MAX_DICE: Final[int] = len(CAMELS)

LeafVisitor = Callable[[Race], None]


@dataclass(slots=True)
class Node:
    race: Race
    parent: int | None = None
    roll: Roll | None = None
    children: dict[Roll, int] = field(default_factory=dict)

    @property
    def is_leaf(self) -> bool:
        return not self.children


class Tree:
    """Arena of nodes; parents and children refer to each other by index."""

    def __init__(self, root: Race) -> None:
        self.nodes: list[Node] = [Node(root)]

    @classmethod
    def build(cls, race: Race, dice: Dice) -> "Tree":
        tree = cls(race)
        tree.expand(dice)
        return tree

    @property
    def root(self) -> Node:
        return self.nodes[0]

    def expand(self, dice: Dice) -> None:
        if len(dice) > MAX_DICE:
            raise ScalingLimitError(
                f"Refusing to enumerate {len(dice)} dice (limit is {MAX_DICE})",
            )
        self._expand_node(0, dice)
        logger.debug("Tree expanded to %d nodes for %d dice", len(self.nodes), len(dice))

    def _expand_node(self, index: int, dice: Dice) -> None:
        for camel in dice:
            remaining = dice.remove(camel)
            for face in FACES:
                roll = Roll(camel, face)
                race = self.nodes[index].race.perform(roll)
                child_index = self._add_child(index, roll, race)
                self._expand_node(child_index, remaining)

    def _add_child(self, index: int, roll: Roll, race: Race) -> int:
        self.nodes.append(Node(race, parent=index, roll=roll))
        child_index = len(self.nodes) - 1
        self.nodes[index].children[roll] = child_index
        return child_index

    def size(self) -> int:
        return len(self.nodes)

    def leaves(self) -> Iterator[Node]:
        return (node for node in self.nodes if node.is_leaf)

    def visit_leaves(self, visitor: LeafVisitor) -> None:
        for node in self.leaves():
            visitor(node.race)

    def path(self, index: int) -> list[Roll]:
        """Rolls leading from the root to the node at `index`."""
        rolls: list[Roll] = []
        node = self.nodes[index]
        while node.parent is not None and node.roll is not None:
            rolls.append(node.roll)
            node = self.nodes[node.parent]
        rolls.reverse()
        return rolls
