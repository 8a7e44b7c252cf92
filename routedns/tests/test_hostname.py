"""
Unit tests for hostname validation and matching.
"""
import unittest

from routedns.hostname import canonicalize, is_dns1123_domain, is_dns1123_label, overlap


class CanonicalizeTest(unittest.TestCase):

    def test_empty_is_unconstrained(self):
        self.assertEqual(canonicalize(''), ('', True))

    def test_lowercase(self):
        self.assertEqual(canonicalize('API.Example.com'), ('api.example.com', True))
        self.assertEqual(canonicalize('*.Example.COM'), ('*.example.com', True))

    def test_ip_addresses_rejected(self):
        for value in ('192.0.2.1', '2001:db8::1', '::1'):
            self.assertFalse(canonicalize(value)[1], value)

    def test_labels(self):
        self.assertTrue(is_dns1123_label('a'))
        self.assertTrue(is_dns1123_label('a-1'))
        self.assertTrue(is_dns1123_label('a' * 63))
        self.assertFalse(is_dns1123_label('a' * 64))
        self.assertFalse(is_dns1123_label(''))
        self.assertFalse(is_dns1123_label('-a'))
        self.assertFalse(is_dns1123_label('a-'))
        self.assertFalse(is_dns1123_label('a_b'))
        self.assertFalse(is_dns1123_label('*'))

    def test_domain_length(self):
        label = 'a' * 63
        self.assertTrue(is_dns1123_domain('.'.join([label] * 4)[:255]))
        self.assertFalse(is_dns1123_domain('.'.join([label] * 4) + '.a'))
        self.assertFalse(canonicalize('a' * 64 + '.example.com')[1])
        self.assertFalse(canonicalize(('a' * 50 + '.') * 5 + 'b' * 6)[1])

    def test_trailing_dot(self):
        self.assertEqual(canonicalize('Example.com.'), ('example.com.', True))
        self.assertEqual(canonicalize('*.example.com.'), ('*.example.com.', True))
        self.assertTrue(is_dns1123_domain('a' * 63 + '.'))
        self.assertEqual(overlap('', 'app.example.com.'), ('app.example.com.', True))

    def test_invalid_domains(self):
        for value in ('example..com', '.example.com', 'example.com..', '.', '*', '*.', 'a.*.com',
                      '**.example.com', 'foo bar.com'):
            self.assertFalse(canonicalize(value)[1], value)


class OverlapTest(unittest.TestCase):

    def test_empty_vs_empty(self):
        self.assertFalse(overlap('', '')[1])

    def test_empty_matches_anything(self):
        self.assertEqual(overlap('', 'api.example.com'), ('api.example.com', True))
        self.assertEqual(overlap('api.example.com', ''), ('api.example.com', True))
        self.assertEqual(overlap('', '*.example.com'), ('*.example.com', True))

    def test_equal(self):
        self.assertEqual(overlap('api.example.com', 'API.example.com'), ('api.example.com', True))
        self.assertEqual(overlap('*.example.com', '*.example.com'), ('*.example.com', True))

    def test_wildcard_suffix(self):
        self.assertEqual(overlap('*.example.com', 'foo.example.com'), ('foo.example.com', True))
        self.assertEqual(overlap('foo.example.com', '*.example.com'), ('foo.example.com', True))
        self.assertEqual(
            overlap('*.example.com', 'bar.foo.example.com'), ('bar.foo.example.com', True))
        self.assertFalse(overlap('*.example.com', 'example.com')[1])
        self.assertFalse(overlap('*.example.com', 'fooexample.com')[1])

    def test_most_specific_wildcard_wins(self):
        self.assertEqual(
            overlap('*.example.com', '*.foo.example.com'), ('*.foo.example.com', True))
        self.assertEqual(
            overlap('*.foo.example.com', '*.example.com'), ('*.foo.example.com', True))

    def test_same_length_wildcard(self):
        self.assertEqual(overlap('*.example.com', 'a.example.com'), ('a.example.com', True))
        self.assertEqual(overlap('a.example.com', '*.example.com'), ('a.example.com', True))

    def test_no_overlap(self):
        self.assertFalse(overlap('api.example.com', 'web.example.com')[1])
        self.assertFalse(overlap('*.example.com', '*.example.org')[1])
        self.assertFalse(overlap('foo.example.com', 'bar.foo.example.com')[1])

    def test_invalid_never_matches(self):
        self.assertFalse(overlap('192.0.2.1', '192.0.2.1')[1])
        self.assertFalse(overlap('', '192.0.2.1')[1])
        self.assertFalse(overlap('a' * 64 + '.example.com', '')[1])
