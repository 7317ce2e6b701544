"""
# Charsub: test_tries.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `tries.py`.
"""

import unittest
import warnings

from charsub.tries import Resolution, SubstitutionTree


class TestTries(unittest.TestCase):
    def test_substitution_tree_add(self):
        tree = SubstitutionTree()
        tree.add('abc', 'def')
        tree.add('ab', 'asd')

        self.assertIsNone(tree.output)
        self.assertEqual(list(tree.children), ['a'])

        node_a = tree.descend('a')
        node_ab = node_a.descend('b')
        node_abc = node_ab.descend('c')
        self.assertIsNone(node_a.output)
        self.assertEqual(node_ab.output, 'asd')
        self.assertEqual(node_abc.output, 'def')
        self.assertTrue(node_ab.is_extensible)
        self.assertFalse(node_abc.is_extensible)
        self.assertIsNone(tree.descend('b'))
        self.assertIsNone(node_abc.descend('d'))

    def test_substitution_tree_add_empty(self):
        tree = SubstitutionTree()
        tree.add('', 'nothing')
        self.assertIsNone(tree.output)
        self.assertFalse(tree.is_extensible)

        tree.add('x', '')
        self.assertEqual(tree.descend('x').output, '')

    def test_substitution_tree_add_overwrite(self):
        tree = SubstitutionTree()
        tree.add('abc', 'def')

        with self.assertWarns(UserWarning) as context:
            tree.add('abc', 'xyz')

        self.assertEqual(
            str(context.warning),
            'warning: overwriting substitution `abc` --> `def` with `abc` --> `xyz`',
        )
        self.assertEqual(tree.descend('a').descend('b').descend('c').output, 'xyz')
        self.assertEqual(tree.count_rules(), 1)

    def test_substitution_tree_add_without_overwrite_does_not_warn(self):
        tree = SubstitutionTree()
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            tree.add('abc', 'def')
            tree.add('ab', 'asd')
            tree.add('abd', 'asd')

    def test_substitution_tree_count_rules(self):
        tree = SubstitutionTree()
        self.assertEqual(tree.count_rules(), 0)

        tree.add("'", '’')
        tree.add("''", '”')
        tree.add('--', '–')
        tree.add('---', '—')
        self.assertEqual(tree.count_rules(), 4)

    def test_substitution_tree_backtrack(self):
        tree = SubstitutionTree()
        tree.add('A', 'a')
        tree.add('ABC', 'b')

        self.assertEqual(tree.backtrack('ABC'), Resolution(emission='b', remainder='', pattern='ABC'))
        self.assertEqual(tree.backtrack('AB'), Resolution(emission='a', remainder='B', pattern='A'))
        self.assertEqual(tree.backtrack('A'), Resolution(emission='a', remainder='', pattern='A'))
        self.assertEqual(tree.backtrack(''), Resolution(emission='', remainder='', pattern=None))

    def test_substitution_tree_backtrack_without_complete_prefix(self):
        tree = SubstitutionTree()
        tree.add('ABC', '$$')
        tree.add('DEF', '!!')

        self.assertEqual(tree.backtrack('AB'), Resolution(emission='AB', remainder='', pattern=None))
        self.assertEqual(tree.backtrack('DE'), Resolution(emission='DE', remainder='', pattern=None))

    def test_substitution_tree_backtrack_longest_complete_prefix(self):
        tree = SubstitutionTree()
        tree.add('a', '1')
        tree.add('abc', '3')
        tree.add('abcde', '5')

        self.assertEqual(tree.backtrack('abcd'), Resolution(emission='3', remainder='d', pattern='abc'))
        self.assertEqual(tree.backtrack('ab'), Resolution(emission='1', remainder='b', pattern='a'))


if __name__ == '__main__':
    unittest.main()
