"""
The **cluster** package is a read-only client for the Kubernetes API server.

It lists the Gateway API resources and Namespaces a DNS resolution pass works from.
"""
from collections import OrderedDict
import logging
import os
from urllib.parse import urljoin

import requests
import requests.exceptions
from requests_toolbelt import user_agent

from cluster.exceptions import KubeException, KubeHTTPException

__version__ = '0.4.0'

logger = logging.getLogger(__name__)
session = None

SERVICE_ACCOUNT_PATH = '/var/run/secrets/kubernetes.io/serviceaccount'


def get_k8s_session(k8s_api_verify_tls):
    global session
    if session is None:
        session = requests.Session()
        session.headers = {
            'Content-Type': 'application/json',
            'User-Agent': user_agent('RouteDNS Controller', __version__)
        }
        token_path = os.path.join(SERVICE_ACCOUNT_PATH, 'token')
        # outside of a pod the session is anonymous, e.g. behind kubectl proxy
        if os.path.exists(token_path):
            with open(token_path) as token_file:
                session.headers['Authorization'] = 'Bearer ' + token_file.read()
        if k8s_api_verify_tls:
            session.verify = os.path.join(SERVICE_ACCOUNT_PATH, 'ca.crt')
        else:
            session.verify = False
    return session


class KubeHTTPClient(object):
    api_version = 'v1'
    api_prefix = 'api'

    def __init__(self, url, k8s_api_verify_tls=True):
        self.url = url
        self.k8s_api_verify_tls = k8s_api_verify_tls
        self.session = get_k8s_session(self.k8s_api_verify_tls)
        self.resource_mapping = OrderedDict()

        # map the various k8s Resources to an internal property
        from cluster.resources import Resource  # lazy load
        for res in Resource:
            name = str(res.__name__).lower()  # singular
            component = name + 's'  # make plural
            # check if component has already been processed
            if component in self.resource_mapping:
                continue

            self.resource_mapping[component] = res(self.url, self.k8s_api_verify_tls)
            # map singular Resource name to the plural one
            self.resource_mapping[name] = component
            if res.short_name is not None:
                # map short name to long name so a resource can be named ns
                # but have the main object live at namespaces
                self.resource_mapping[str(res.short_name).lower()] = component

    def api(self, tmpl, *args):
        """Return a fully-qualified Kubernetes API URL from a string template with args."""
        return "/{}/{}".format(self.api_prefix, self.api_version) + tmpl.format(*args)

    def __getattr__(self, name):
        mapping = self.__dict__.get('resource_mapping', {})
        if name in mapping:
            # resolve to final name if needed
            component = mapping[name]
            if type(component) is not str:
                # already a component object
                return component

            return mapping[component]

        return object.__getattribute__(self, name)

    @staticmethod
    def unhealthy(status_code):
        return not 200 <= status_code <= 299

    @staticmethod
    def query_params(labels=None):
        query = {}

        # labels are encoded slightly differently than python-requests can do
        if labels:
            selectors = []
            for key, value in labels.items():
                # http://kubernetes.io/docs/user-guide/labels/#set-based-requirement
                if '__notin' in key:
                    key = key.replace('__notin', '')
                    selectors.append('{} notin ({})'.format(key, ','.join(value)))
                elif '__notexists' in key:
                    selectors.append('!' + key.replace('__notexists', ''))
                # list is automagically a in()
                elif '__in' in key or isinstance(value, list):
                    key = key.replace('__in', '')
                    selectors.append('{} in ({})'.format(key, ','.join(value)))
                elif value is None:
                    # allowing a check if a label exists (or not) without caring about value
                    selectors.append(key)
                # http://kubernetes.io/docs/user-guide/labels/#equality-based-requirement
                elif isinstance(value, str):
                    selectors.append('{}={}'.format(key, value))

            query['labelSelector'] = ','.join(selectors)

        return query

    def http_get(self, path, params=None, **kwargs):
        """
        Make a GET request to the k8s server.
        """
        try:
            url = urljoin(self.url, path)
            response = self.session.get(url, params=params, **kwargs)
        except requests.exceptions.ConnectionError as err:
            # reraise as KubeException, but log stacktrace.
            message = "There was a problem retrieving data from " \
                      "the Kubernetes API server. URL: {}, params: {}".format(url, params)
            logger.error(message)
            raise KubeException(message) from err

        return response


ClusterClient = KubeHTTPClient
