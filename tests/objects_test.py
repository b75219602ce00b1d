from unittest import TestCase

from seqkit.objects import find_key, omit

class TestFindKey(TestCase):
    def setUp(self):
        self.users = {'barney': {'age': 36, 'active': True},
                      'fred': {'age': 40, 'active': False},
                      'pebbles': {'age': 1, 'active': True}}

    def test_first_match(self):
        self.assertEqual('barney', find_key(self.users, lambda user: user['age'] < 40))

    def test_predicate_receives_key(self):
        self.assertEqual('pebbles', find_key(self.users, lambda user, key: key.startswith('p')))

    def test_no_match(self):
        self.assertIsNone(find_key(self.users, lambda user: user['age'] > 100))
        self.assertIsNone(find_key({}, lambda user: True))

class TestOmit(TestCase):
    def test_omit(self):
        source = {'a': 1, 'b': '2', 'c': 3}
        self.assertEqual({'b': '2'}, omit(source, 'a', 'c'))
        self.assertEqual({'a': 1, 'b': '2', 'c': 3}, source)

    def test_unknown_keys_ignored(self):
        self.assertEqual({'a': 1}, omit({'a': 1}, 'z'))

    def test_no_keys_copies(self):
        source = {'a': 1}
        result = omit(source)
        self.assertEqual(source, result)
        self.assertIsNot(source, result)
