from cluster.resources import Resource
from cluster.exceptions import KubeHTTPException

GATEWAY_GROUP = 'gateway.networking.k8s.io'


class GatewayResource(Resource):
    abstract = True
    kind = None
    api_prefix = 'apis'
    api_version = GATEWAY_GROUP + '/v1'

    @property
    def plural(self):
        return self.kind.lower() + 's'

    def get(self, namespace=None, name=None, ignore_exception=False, **kwargs):
        """
        Fetch a single object or a list of objects

        An empty namespace lists the objects of every namespace.
        """
        if name is not None:
            url = self.api("/namespaces/{}/{}/{}", namespace, self.plural, name)
            message = 'get {} {}/{}'.format(self.kind, namespace, name)
        elif namespace:
            url = self.api("/namespaces/{}/{}", namespace, self.plural)
            message = 'get {}s in Namespace {}'.format(self.kind, namespace)
        else:
            url = self.api("/{}", self.plural)
            message = 'get {}s'.format(self.kind)

        response = self.http_get(url, params=self.query_params(**kwargs))
        if not ignore_exception and self.unhealthy(response.status_code):
            raise KubeHTTPException(response, message)

        return response


class Gateway(GatewayResource):
    kind = "Gateway"


class HTTPRoute(GatewayResource):
    kind = "HTTPRoute"


class GRPCRoute(GatewayResource):
    kind = "GRPCRoute"


class TLSRoute(GatewayResource):
    kind = "TLSRoute"
    api_version = GATEWAY_GROUP + '/v1alpha2'


class TCPRoute(GatewayResource):
    kind = "TCPRoute"
    api_version = GATEWAY_GROUP + '/v1alpha2'


class UDPRoute(GatewayResource):
    kind = "UDPRoute"
    api_version = GATEWAY_GROUP + '/v1alpha2'
