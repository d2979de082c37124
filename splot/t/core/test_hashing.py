from unittest import TestCase

import numpy as np

from splot.core.color import Colors
from splot.core.hashing import combine_hashes, value_hash
from splot.core.unset import UNSET


class TestCombineHashes(TestCase):

    def test_known_values(self):
        self.assertEqual(combine_hashes([]), 17)
        self.assertEqual(
            combine_hashes([1, 2]), (17 * 23 + 1) * 23 + 2,
            msg='Hashes are combined as h = 23 * h + hash(v), seed 17.'
        )

    def test_order_sensitive(self):
        self.assertNotEqual(combine_hashes([1, 2]), combine_hashes([2, 1]))

    def test_signed_32_bit(self):
        h = combine_hashes([2 ** 40, -3, 'text', Colors.RED] * 5)
        self.assertTrue(-2 ** 31 <= h < 2 ** 31)
        self.assertEqual(
            combine_hashes([2 ** 31 - 17 * 23]), -2 ** 31,
            msg='Overflow must wrap around like a signed 32 bit integer.'
        )

    def test_deterministic(self):
        values = ['Arial', 12.0, UNSET, Colors.BLUE, None]
        self.assertEqual(combine_hashes(values), combine_hashes(list(values)))


class TestValueHash(TestCase):

    def test_none_and_nan(self):
        self.assertEqual(value_hash(None), 0)
        self.assertEqual(
            value_hash(float('nan')), value_hash(np.float32('nan')),
            msg='All NaN values must hash alike.'
        )

    def test_unhashable_containers(self):
        self.assertEqual(value_hash([1, [2, 3]]), value_hash((1, (2, 3))))
        self.assertEqual(
            value_hash({'b': [1], 'a': 2}), value_hash({'a': 2, 'b': [1]}),
            msg='Dicts hash independent of insertion order.'
        )
        self.assertNotEqual(value_hash({'a': 1}), value_hash({'a': 2}))
        self.assertEqual(value_hash({1, 2}), value_hash({2, 1}))

    def test_arrays(self):
        a = np.arange(6.0).reshape(2, 3)
        self.assertEqual(value_hash(a), value_hash(a.copy()))
        self.assertNotEqual(value_hash(a), value_hash(a.reshape(3, 2)))
        b = a.copy()
        b[0, 0] = 10
        self.assertNotEqual(value_hash(a), value_hash(b))

    def test_identity_fallback(self):
        class Unhashable:
            __hash__ = None

        obj = Unhashable()
        self.assertEqual(value_hash(obj), value_hash(obj))
        self.assertNotEqual(value_hash(obj), value_hash(Unhashable()))

    def test_unset(self):
        self.assertNotEqual(
            value_hash(UNSET), value_hash('UNSET'),
            msg='UNSET must not hash like the string "UNSET".'
        )
        self.assertEqual(value_hash(UNSET), hash(UNSET))
        self.assertEqual(len({UNSET, 'UNSET'}), 2)
