"""
Unit tests for label selectors.
"""
import unittest

from routedns.exceptions import InvalidSelector
from routedns.selector import filter_matches, parse_selector, selector_matches


class SelectorMatchesTest(unittest.TestCase):

    labels = {'team': 'web', 'env': 'prod'}

    def test_empty_selector_matches_everything(self):
        self.assertTrue(selector_matches({}, self.labels))
        self.assertTrue(selector_matches({}, {}))

    def test_match_labels(self):
        self.assertTrue(selector_matches({'matchLabels': {'team': 'web'}}, self.labels))
        self.assertFalse(selector_matches({'matchLabels': {'team': 'db'}}, self.labels))
        self.assertFalse(selector_matches({'matchLabels': {'team': 'web'}}, {}))

    def test_match_expressions(self):
        def expr(operator, values=None):
            data = {'key': 'env', 'operator': operator}
            if values is not None:
                data['values'] = values
            return {'matchExpressions': [data]}

        self.assertTrue(selector_matches(expr('In', ['prod', 'stage']), self.labels))
        self.assertFalse(selector_matches(expr('In', ['dev']), self.labels))
        self.assertTrue(selector_matches(expr('NotIn', ['dev']), self.labels))
        self.assertFalse(selector_matches(expr('NotIn', ['prod']), self.labels))
        self.assertTrue(selector_matches(expr('NotIn', ['prod']), {}))
        self.assertTrue(selector_matches(expr('Exists'), self.labels))
        self.assertFalse(selector_matches(expr('Exists'), {}))
        self.assertTrue(selector_matches(expr('DoesNotExist'), {}))
        self.assertFalse(selector_matches(expr('DoesNotExist', []), self.labels))

    def test_malformed(self):
        for selector in (
            None,
            {'matchLabels': {'team': 1}},
            {'matchExpressions': [{'key': 'env', 'operator': 'Like', 'values': ['a']}]},
            {'matchExpressions': [{'key': 'env', 'operator': 'In'}]},
            {'matchExpressions': [{'key': 'env', 'operator': 'In', 'values': []}]},
            {'matchExpressions': [{'key': 'env', 'operator': 'Exists', 'values': ['a']}]},
            {'matchExpressions': [{'operator': 'Exists'}]},
        ):
            with self.assertRaises(InvalidSelector, msg=str(selector)):
                selector_matches(selector, self.labels)


class FilterMatchesTest(unittest.TestCase):

    labels = {'team': 'web', 'env': 'prod'}

    def test_empty(self):
        self.assertTrue(filter_matches({}, self.labels))
        self.assertTrue(filter_matches(None, None))

    def test_forms(self):
        self.assertTrue(filter_matches({'team': 'web'}, self.labels))
        self.assertFalse(filter_matches({'team': 'db'}, self.labels))
        self.assertTrue(filter_matches({'env__in': ['prod', 'dev']}, self.labels))
        self.assertTrue(filter_matches({'env': ['prod']}, self.labels))
        self.assertFalse(filter_matches({'env__in': ['dev']}, self.labels))
        self.assertFalse(filter_matches({'env__notin': ['prod']}, self.labels))
        self.assertTrue(filter_matches({'zone__notin': ['a']}, self.labels))
        self.assertTrue(filter_matches({'team': None}, self.labels))
        self.assertFalse(filter_matches({'zone': None}, self.labels))
        self.assertTrue(filter_matches({'zone__notexists': None}, self.labels))
        self.assertFalse(filter_matches({'team__notexists': None}, self.labels))


class ParseSelectorTest(unittest.TestCase):

    def test_empty(self):
        self.assertEqual(parse_selector(''), {})
        self.assertEqual(parse_selector(None), {})

    def test_forms(self):
        self.assertEqual(
            parse_selector('app=web, tier in (a, b),env notin (dev),zone!=x,managed,!legacy'),
            {
                'app': 'web',
                'tier__in': ['a', 'b'],
                'env__notin': ['dev'],
                'zone__notin': ['x'],
                'managed': None,
                'legacy__notexists': None,
            })
        self.assertEqual(parse_selector('app==web'), {'app': 'web'})

    def test_parsed_filter_matches(self):
        filters = parse_selector('team=web,env in (prod)')
        self.assertTrue(filter_matches(filters, {'team': 'web', 'env': 'prod'}))
        self.assertFalse(filter_matches(filters, {'team': 'web', 'env': 'dev'}))

    def test_malformed(self):
        for text in ('tier in (a', 'tier in ()', 'tier in a', '=web', 'a)'):
            with self.assertRaises(InvalidSelector, msg=text):
                parse_selector(text)
