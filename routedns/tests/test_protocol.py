"""
Unit tests for protocol compatibility.
"""
import unittest

from routedns import protocol
from routedns.protocol import compatible


class CompatibleTest(unittest.TestCase):

    def test_same_protocol(self):
        for value in protocol.PROTOCOLS:
            self.assertTrue(compatible(value, value), value)

    def test_http_https_equivalent(self):
        self.assertTrue(compatible(protocol.HTTPS, protocol.HTTP))
        self.assertTrue(compatible(protocol.HTTP, protocol.HTTPS))

    def test_tls_listener_accepts_tcp_route(self):
        self.assertTrue(compatible(protocol.TCP, protocol.TLS))
        self.assertFalse(compatible(protocol.TLS, protocol.TCP))

    def test_mismatch(self):
        self.assertFalse(compatible(protocol.UDP, protocol.TCP))
        self.assertFalse(compatible(protocol.HTTP, protocol.TCP))
        self.assertFalse(compatible(protocol.TLS, protocol.HTTPS))
