import unittest

import requests_mock

from cluster import ClusterClient

KUBE_URL = 'http://test-kubernetes.example.com'


class TestCase(unittest.TestCase):
    """Runs each test against a stubbed Kubernetes API server."""

    def setUp(self):
        self.mock = requests_mock.Mocker()
        self.mock.start()
        self.addCleanup(self.mock.stop)
        self.client = ClusterClient(KUBE_URL, k8s_api_verify_tls=False)

    def register_list(self, path, items, **kwargs):
        return self.mock.get(KUBE_URL + path, json={'kind': 'List', 'items': items}, **kwargs)
