"""
Settings for the route DNS controller, read from the environment.
"""
import logging.config
import os

from .selector import parse_selector
from .utils import to_bool

# A boolean that turns on/off debug logging.
DEBUG = to_bool(os.environ.get('ROUTEDNS_DEBUG', 'false'))

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'root': {'level': 'DEBUG' if DEBUG else 'WARN'},
    'formatters': {
        'verbose': {
            'format': '%(levelname)s %(asctime)s %(module)s %(process)d %(thread)d %(message)s'
        },
        'simple': {
            'format': '%(levelname)s %(message)s'
        },
    },
    'handlers': {
        'null': {
            'level': 'DEBUG',
            'class': 'logging.NullHandler',
        },
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'verbose' if DEBUG else 'simple'
        }
    },
    'loggers': {
        'cluster': {
            'handlers': ['console'],
            'level': 'DEBUG' if DEBUG else 'INFO',
            'propagate': False,
        },
        'routedns': {
            'handlers': ['console'],
            'level': 'DEBUG' if DEBUG else 'INFO',
            'propagate': False,
        },
    },
}

# Kubernetes API server, in-cluster by default
KUBERNETES_API_URL = os.environ.get('KUBERNETES_API_URL', 'https://{}:{}'.format(
    os.environ.get('KUBERNETES_SERVICE_HOST', 'kubernetes.default'),
    os.environ.get('KUBERNETES_SERVICE_PORT', '443'),
))
K8S_API_VERIFY_TLS = to_bool(os.environ.get('K8S_API_VERIFY_TLS', 'true'))

# Only Routes attached to the Gateway of this name publish records
ROUTEDNS_GATEWAY_NAME = os.environ.get('ROUTEDNS_GATEWAY_NAME', '')
# Gateways are listed in this namespace, all namespaces when empty
ROUTEDNS_GATEWAY_NAMESPACE = os.environ.get('ROUTEDNS_GATEWAY_NAMESPACE', '')
ROUTEDNS_GATEWAY_LABEL_FILTER = parse_selector(
    os.environ.get('ROUTEDNS_GATEWAY_LABEL_FILTER', ''))

# Routes are listed in this namespace, all namespaces when empty
ROUTEDNS_NAMESPACE = os.environ.get('ROUTEDNS_NAMESPACE', '')
ROUTEDNS_LABEL_FILTER = parse_selector(os.environ.get('ROUTEDNS_LABEL_FILTER', ''))
ROUTEDNS_ANNOTATION_FILTER = parse_selector(os.environ.get('ROUTEDNS_ANNOTATION_FILTER', ''))

# e.g. ${name}.${namespace}.example.com
ROUTEDNS_FQDN_TEMPLATE = os.environ.get('ROUTEDNS_FQDN_TEMPLATE', '')
ROUTEDNS_COMBINE_FQDN_ANNOTATION = to_bool(
    os.environ.get('ROUTEDNS_COMBINE_FQDN_ANNOTATION', 'false'))
ROUTEDNS_IGNORE_HOSTNAME_ANNOTATION = to_bool(
    os.environ.get('ROUTEDNS_IGNORE_HOSTNAME_ANNOTATION', 'false'))


def configure_logging():
    logging.config.dictConfig(LOGGING)
