"""
# Charsub: tries.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Prefix tree of substitution rules.
"""

import warnings
from typing import NamedTuple, Optional


class SubstitutionTree:
    """
    A node in a prefix tree of substitution rules, keyed by character.

    The path of characters from the root to a node spells a pattern.
    If `output` is not None, that pattern is a complete rule and `output` is its substitute.
    The root never carries output, since the empty pattern cannot be substituted.

    Every node other than the root is created by `add(...)` on the way to a terminal node,
    so a childless non-root node always carries output.
    """
    _output: Optional[str]
    _children: dict[str, 'SubstitutionTree']

    def __init__(self):
        self._output = None
        self._children = {}

    @property
    def output(self) -> Optional[str]:
        return self._output

    @property
    def children(self) -> dict[str, 'SubstitutionTree']:
        return self._children

    @property
    def is_extensible(self) -> bool:
        return len(self._children) > 0

    def descend(self, character: str) -> Optional['SubstitutionTree']:
        return self._children.get(character)

    def add(self, pattern: str, substitute: str):
        """
        Register the rule `pattern` --> `substitute`.

        Re-adding a pattern overwrites its substitute (last write wins), with a warning.
        An empty pattern is accepted but has no effect.
        """
        if pattern == '':
            return

        node = self
        for character in pattern:
            child = node._children.get(character)
            if child is None:
                child = SubstitutionTree()
                node._children[character] = child
            node = child

        if node._output is not None:
            warnings.warn(
                f'warning: overwriting substitution `{pattern}` --> `{node._output}` '
                f'with `{pattern}` --> `{substitute}`'
            )

        node._output = substitute

    def count_rules(self) -> int:
        count = 0
        unvisited_nodes = [self]
        while len(unvisited_nodes) > 0:
            node = unvisited_nodes.pop()
            if node._output is not None:
                count += 1
            unvisited_nodes.extend(node._children.values())

        return count

    def backtrack(self, candidate: str) -> 'Resolution':
        """
        Resolve a candidate that can no longer be extended.

        The candidate is walked from this (root) node, noting the end of the longest prefix
        that completes a rule. Then:
        - if the whole candidate completes a rule, the emission is its substitute;
        - if no prefix completes a rule, the emission is the candidate itself, literally;
        - otherwise the emission is the substitute for the longest complete prefix,
          and the rest of the candidate is the (literal) remainder.
        """
        node = self
        longest_output = None
        longest_end_index = 0

        for index, character in enumerate(candidate, start=1):
            node = node.descend(character)
            if node is None:
                break

            if node.output is not None:
                longest_output = node.output
                longest_end_index = index

        if longest_output is None:
            return Resolution(emission=candidate, remainder='')

        return Resolution(
            emission=longest_output,
            remainder=candidate[longest_end_index:],
            pattern=candidate[:longest_end_index],
        )


class Resolution(NamedTuple):
    emission: str
    remainder: str
    pattern: Optional[str] = None
