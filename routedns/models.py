"""
Read-only views over decoded Kubernetes objects.

Every Route kind is adapted to the same shape (hostnames, parent references,
protocol, status parents) so the resolver is written once against ``BaseRoute``.
"""
from . import protocol
from .exceptions import UnsupportedRouteKind
from .utils import str_val

GATEWAY_GROUP = 'gateway.networking.k8s.io'
GATEWAY_KIND = 'Gateway'

ROUTE_CONDITION_ACCEPTED = 'Accepted'
CONDITION_TRUE = 'True'

NAMESPACES_FROM_ALL = 'All'
NAMESPACES_FROM_SAME = 'Same'
NAMESPACES_FROM_SELECTOR = 'Selector'


class KubeObject(object):

    def __init__(self, obj):
        self.obj = obj

    def __repr__(self):
        return '<{} {}/{}>'.format(type(self).__name__, self.namespace, self.name)

    @property
    def metadata(self):
        return self.obj.get('metadata') or {}

    @property
    def name(self):
        return self.metadata.get('name', '')

    @property
    def namespace(self):
        return self.metadata.get('namespace', '')

    @property
    def labels(self):
        return self.metadata.get('labels') or {}

    @property
    def annotations(self):
        return self.metadata.get('annotations') or {}

    @property
    def api_version(self):
        return self.obj.get('apiVersion', '')

    @property
    def group(self):
        return self.api_version.rpartition('/')[0]

    @property
    def kind(self):
        return self.obj.get('kind', '')

    @property
    def spec(self):
        return self.obj.get('spec') or {}

    @property
    def status(self):
        return self.obj.get('status') or {}


class Namespace(KubeObject):
    pass


class Listener(object):

    def __init__(self, data):
        self.data = data

    @property
    def name(self):
        return self.data.get('name', '')

    @property
    def protocol(self):
        return self.data.get('protocol', '')

    @property
    def port(self):
        return self.data.get('port')

    @property
    def hostname(self):
        return self.data.get('hostname') or ''

    @property
    def allowed_routes(self):
        return self.data.get('allowedRoutes') or {}

    @property
    def namespaces_from(self):
        namespaces = self.allowed_routes.get('namespaces') or {}
        return namespaces.get('from') or NAMESPACES_FROM_SAME

    @property
    def namespaces_selector(self):
        namespaces = self.allowed_routes.get('namespaces') or {}
        return namespaces.get('selector')

    @property
    def kinds(self):
        """The (group, kind) pairs allowed to attach, empty when any kind may."""
        return [(str_val(gk.get('group'), GATEWAY_GROUP), gk.get('kind', ''))
                for gk in self.allowed_routes.get('kinds') or []]


class Gateway(KubeObject):

    @property
    def listeners(self):
        return [Listener(data) for data in self.spec.get('listeners') or []]

    @property
    def addresses(self):
        return [addr['value'] for addr in self.status.get('addresses') or []
                if addr.get('value')]


class ParentReference(object):

    def __init__(self, data):
        self.data = data

    def __repr__(self):
        return '<ParentReference {}/{}>'.format(self.data.get('namespace') or '', self.name)

    @property
    def name(self):
        return self.data.get('name', '')

    @property
    def section_name(self):
        return self.data.get('sectionName') or ''

    @property
    def port(self):
        return self.data.get('port')

    def namespace_or(self, default):
        return str_val(self.data.get('namespace'), default)

    @property
    def group(self):
        return str_val(self.data.get('group'), GATEWAY_GROUP)

    @property
    def kind(self):
        return str_val(self.data.get('kind'), GATEWAY_KIND)

    def identity(self, default_namespace):
        return (self.namespace_or(default_namespace), self.group, self.kind, self.name)


class RouteParentStatus(object):

    def __init__(self, data):
        self.data = data

    @property
    def parent_ref(self):
        return ParentReference(self.data.get('parentRef') or {})

    @property
    def conditions(self):
        return self.data.get('conditions') or []

    @property
    def accepted(self):
        """Whether the parent accepted the Route; a missing condition is not accepted."""
        for condition in self.conditions:
            if condition.get('type') == ROUTE_CONDITION_ACCEPTED:
                return condition.get('status') == CONDITION_TRUE
        return False


class BaseRoute(KubeObject):
    protocol = None
    has_hostnames = True

    @property
    def hostnames(self):
        if not self.has_hostnames:
            return []
        return list(self.spec.get('hostnames') or [])

    @property
    def parent_refs(self):
        return [ParentReference(data) for data in self.spec.get('parentRefs') or []]

    @property
    def parents(self):
        return [RouteParentStatus(data) for data in self.status.get('parents') or []]

    @property
    def group(self):
        return super().group or GATEWAY_GROUP

    @property
    def kind(self):
        return super().kind or type(self).__name__


class HTTPRoute(BaseRoute):
    protocol = protocol.HTTP


class GRPCRoute(BaseRoute):
    protocol = protocol.HTTPS


class TLSRoute(BaseRoute):
    protocol = protocol.TLS


class TCPRoute(BaseRoute):
    protocol = protocol.TCP
    has_hostnames = False


class UDPRoute(BaseRoute):
    protocol = protocol.UDP
    has_hostnames = False


ROUTE_KINDS = {cls.__name__: cls for cls in (HTTPRoute, GRPCRoute, TLSRoute, TCPRoute, UDPRoute)}


def route_for(obj, kind=None):
    """Adapt a decoded Route object; kind is used when the object carries none."""
    kind = obj.get('kind') or kind
    if kind not in ROUTE_KINDS:
        raise UnsupportedRouteKind(kind)
    return ROUTE_KINDS[kind](obj)
