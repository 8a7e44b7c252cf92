"""
Literal Kubernetes objects used as fixtures by the routedns tests.
"""
from routedns.models import GATEWAY_GROUP


def gateway(namespace, name, listeners, addresses=('10.0.0.1', ), annotations=None):
    return {
        'apiVersion': GATEWAY_GROUP + '/v1',
        'kind': 'Gateway',
        'metadata': {
            'name': name,
            'namespace': namespace,
            'annotations': annotations or {},
        },
        'spec': {
            'gatewayClassName': 'default',
            'listeners': listeners,
        },
        'status': {
            'addresses': [{'type': 'IPAddress', 'value': value} for value in addresses],
        },
    }


def listener(name, protocol='HTTP', port=80, hostname=None, namespaces_from=None,
             selector=None, kinds=None):
    data = {'name': name, 'protocol': protocol, 'port': port}
    if hostname is not None:
        data['hostname'] = hostname
    allowed_routes = {}
    if namespaces_from is not None:
        allowed_routes['namespaces'] = {'from': namespaces_from}
        if selector is not None:
            allowed_routes['namespaces']['selector'] = selector
    if kinds is not None:
        allowed_routes['kinds'] = kinds
    if allowed_routes:
        data['allowedRoutes'] = allowed_routes
    return data


def namespace(name, labels=None):
    return {
        'apiVersion': 'v1',
        'kind': 'Namespace',
        'metadata': {'name': name, 'labels': labels or {}},
    }


def parent_ref(name, **kwargs):
    ref = {'name': name}
    for key in ('namespace', 'group', 'kind', 'sectionName', 'port'):
        if key in kwargs:
            ref[key] = kwargs[key]
    return ref


def route(namespace, name, parent_refs, hostnames=None, kind='HTTPRoute', accepted=True,
          status_refs=None, annotations=None, api_version=GATEWAY_GROUP + '/v1'):
    """Build a Route whose status mirrors parent_refs unless status_refs is given."""
    conditions = [{
        'type': 'Accepted',
        'status': 'True' if accepted else 'False',
        'reason': 'Accepted' if accepted else 'NotAllowedByListeners',
    }]
    spec = {'parentRefs': parent_refs, 'rules': []}
    if hostnames is not None:
        spec['hostnames'] = hostnames
    return {
        'apiVersion': api_version,
        'kind': kind,
        'metadata': {
            'name': name,
            'namespace': namespace,
            'annotations': annotations or {},
        },
        'spec': spec,
        'status': {
            'parents': [
                {
                    'parentRef': ref,
                    'controllerName': 'example.com/gateway-controller',
                    'conditions': conditions,
                }
                for ref in (parent_refs if status_refs is None else status_refs)
            ],
        },
    }
