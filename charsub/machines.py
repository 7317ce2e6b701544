"""
# Charsub: machines.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Streaming longest-match substitution.
"""

import sys
from typing import Optional

from charsub.tries import SubstitutionTree


class CharSubMachine:
    """
    Object applying substitution rules to text fed in successive chunks.

    ## `process`

    Scans `pending + string` character by character.
    A character that begins a pattern opens a _candidate_, which grows while the tree allows.
    When the next character cannot extend the candidate (a _dead end_),
    the candidate is resolved to a substitute (or literal text) via `SubstitutionTree.backtrack`,
    and the character is rescanned from the root.
    A candidate still open at the end of the chunk is either emitted (if it cannot grow further)
    or kept as `pending` for the next call.

    ## `flush`

    Resolves and clears `pending` at the end of the stream.

    Not safe for concurrent use, since `pending` is mutated by both methods.
    The tree may be shared read-only between machines.
    """
    _tree: 'SubstitutionTree'
    _pending: Optional[str]
    _verbose_mode_enabled: bool

    def __init__(self, tree: Optional['SubstitutionTree'] = None, verbose_mode_enabled: bool = False):
        if tree is None:
            tree = SubstitutionTree()

        self._tree = tree
        self._pending = None
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def tree(self) -> 'SubstitutionTree':
        return self._tree

    @property
    def pending(self) -> Optional[str]:
        return self._pending

    @property
    def is_buffering(self) -> bool:
        return self._pending is not None

    def add_substitution(self, pattern: str, substitute: str):
        self._tree.add(pattern, substitute)

    def process(self, string: str) -> str:
        """
        Apply substitutions to the next chunk of text.

        The result may fall short of the chunk if a trailing candidate could still grow;
        it is buffered and resolved by the next call to `process` or `flush`.
        If nothing was substituted or buffered, the chunk itself is returned.
        """
        pending = self._pending
        self._pending = None
        if pending is not None:
            string = pending + string

        root = self._tree
        node = root
        candidate_start_index: Optional[int] = None
        literal_start_index = 0
        pieces: list[str] = []

        for index, character in enumerate(string):
            if candidate_start_index is not None:
                child = node.descend(character)
                if child is not None:
                    node = child
                    continue

                pieces.append(self._resolve_dead_end(string[candidate_start_index:index], node))
                node = root
                candidate_start_index = None
                literal_start_index = index

            child = root.descend(character)
            if child is not None:
                pieces.append(string[literal_start_index:index])
                candidate_start_index = index
                node = child

        if candidate_start_index is None:
            if len(pieces) == 0:
                return string
            pieces.append(string[literal_start_index:])
        elif node.is_extensible:
            self._pending = string[candidate_start_index:]
        else:
            pieces.append(self._substitute(string[candidate_start_index:], node.output))

        return ''.join(pieces)

    def flush(self) -> str:
        """
        Resolve whatever candidate is still buffered, returning the empty string if there is none.
        """
        pending = self._pending
        self._pending = None
        if pending is None:
            return ''

        return self._backtrack(pending)

    def _resolve_dead_end(self, candidate: str, node: 'SubstitutionTree') -> str:
        if node.output is not None:
            return self._substitute(candidate, node.output)

        return self._backtrack(candidate)

    def _backtrack(self, candidate: str) -> str:
        resolution = self._tree.backtrack(candidate)
        if resolution.pattern is not None:
            self._substitute(resolution.pattern, resolution.emission)

        return resolution.emission + resolution.remainder

    def _substitute(self, pattern: str, substitute: str) -> str:
        if self._verbose_mode_enabled:
            print(f'substituted `{pattern}` --> `{substitute}`', file=sys.stderr)

        return substitute
