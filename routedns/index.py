"""
Per-pass lookup tables over a Gateway and Namespace snapshot.
"""


class GatewayListeners(object):

    def __init__(self, gateway):
        self.gateway = gateway
        listeners = gateway.listeners
        self.sections = {lis.name: [lis] for lis in listeners}
        # no section name means every listener is a candidate
        self.sections[''] = listeners

    def listeners(self, section_name=''):
        return self.sections.get(section_name or '', [])


class GatewayIndex(object):
    """Gateways by (namespace, name) and Namespaces by name, read-only once built."""

    def __init__(self, gateways, namespaces):
        self.gateways = gateways
        self.namespaces = namespaces

    @classmethod
    def build(cls, gateways, namespaces):
        gws = {}
        for gw in gateways:
            gws[(gw.namespace, gw.name)] = GatewayListeners(gw)
        nss = {ns.name: ns for ns in namespaces}
        return cls(gws, nss)

    def gateway(self, namespace, name):
        return self.gateways.get((namespace, name))

    def namespace(self, name):
        return self.namespaces.get(name)
