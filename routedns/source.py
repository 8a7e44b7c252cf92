"""
Endpoints for the Routes of one kind, computed from the live cluster state.
"""
import logging

from cluster import ClusterClient

from . import annotations, settings
from .endpoint import endpoints_for_hostname
from .exceptions import RouteResolutionError
from .fqdn import parse_template
from .index import GatewayIndex
from .models import Gateway, Namespace, route_for
from .resolver import GatewayRouteResolver
from .selector import filter_matches

logger = logging.getLogger(__name__)


class Config(object):

    def __init__(self, gateway_name='', gateway_namespace='', gateway_label_filter=None,
                 namespace='', label_filter=None, annotation_filter=None, fqdn_template='',
                 combine_fqdn_annotation=False, ignore_hostname_annotation=False):
        self.gateway_name = gateway_name
        self.gateway_namespace = gateway_namespace
        self.gateway_label_filter = gateway_label_filter or {}
        self.namespace = namespace
        self.label_filter = label_filter or {}
        self.annotation_filter = annotation_filter or {}
        self.fqdn_template = fqdn_template
        self.combine_fqdn_annotation = combine_fqdn_annotation
        self.ignore_hostname_annotation = ignore_hostname_annotation

    @classmethod
    def from_settings(cls):
        return cls(
            gateway_name=settings.ROUTEDNS_GATEWAY_NAME,
            gateway_namespace=settings.ROUTEDNS_GATEWAY_NAMESPACE,
            gateway_label_filter=settings.ROUTEDNS_GATEWAY_LABEL_FILTER,
            namespace=settings.ROUTEDNS_NAMESPACE,
            label_filter=settings.ROUTEDNS_LABEL_FILTER,
            annotation_filter=settings.ROUTEDNS_ANNOTATION_FILTER,
            fqdn_template=settings.ROUTEDNS_FQDN_TEMPLATE,
            combine_fqdn_annotation=settings.ROUTEDNS_COMBINE_FQDN_ANNOTATION,
            ignore_hostname_annotation=settings.ROUTEDNS_IGNORE_HOSTNAME_ANNOTATION,
        )


def get_client():
    return ClusterClient(settings.KUBERNETES_API_URL, settings.K8S_API_VERIFY_TLS)


class GatewayRouteSource(object):
    """
    Lists Routes of one kind with the Gateways and Namespaces they attach to and
    turns them into endpoints.

    Raises KubeException when the cluster state cannot be read.
    """

    def __init__(self, client, kind, config=None):
        self.client = client
        self.kind = kind
        self.config = config or Config.from_settings()
        # parsed up front so a broken template fails at start-up, not per pass
        self.fqdn_template = parse_template(self.config.fqdn_template)

    @property
    def routes_resource(self):
        return getattr(self.client, self.kind.lower() + 's')

    def routes(self):
        resource = self.routes_resource
        response = resource.get(self.config.namespace, labels=self.config.label_filter)
        return [route_for(obj, self.kind) for obj in resource.items(response)]

    def gateways(self):
        response = self.client.gateways.get(
            self.config.gateway_namespace, labels=self.config.gateway_label_filter)
        return [Gateway(obj) for obj in self.client.gateways.items(response)]

    def namespaces(self):
        return [Namespace(obj) for obj in self.client.ns.items(self.client.ns.get())]

    def resolver(self):
        index = GatewayIndex.build(self.gateways(), self.namespaces())
        return GatewayRouteResolver(
            index,
            gateway_name=self.config.gateway_name,
            fqdn_template=self.fqdn_template,
            combine_fqdn_annotation=self.config.combine_fqdn_annotation,
            ignore_hostname_annotation=self.config.ignore_hostname_annotation,
        )

    def endpoints(self):
        endpoints = []
        routes = self.routes()
        resolver = self.resolver()
        kind = self.kind.lower()
        for rt in routes:
            annots = rt.annotations
            if not filter_matches(self.config.annotation_filter, annots):
                continue
            if not annotations.managed_by_us(annots):
                logger.debug(
                    "Skipping {} {}/{} because controller value does not match, "
                    "found: {}, required: {}".format(
                        self.kind, rt.namespace, rt.name,
                        annots.get(annotations.CONTROLLER_KEY), annotations.CONTROLLER_VALUE))
                continue

            try:
                host_targets = resolver.resolve(rt)
            except RouteResolutionError as e:
                logger.error("Failed to resolve {} {}/{}: {}".format(
                    self.kind, rt.namespace, rt.name, e))
                continue
            if not host_targets:
                logger.debug("No endpoints could be generated from {} {}/{}".format(
                    self.kind, rt.namespace, rt.name))
                continue

            resource = "{}/{}/{}".format(kind, rt.namespace, rt.name)
            provider_specific = annotations.provider_specific(annots)
            set_identifier = annotations.set_identifier(annots)
            ttl = annotations.ttl(annots, resource)
            route_endpoints = []
            for host in sorted(host_targets):
                route_endpoints.extend(endpoints_for_hostname(
                    host, host_targets[host], ttl, provider_specific, set_identifier, resource))
            logger.debug("Endpoints generated from {} {}/{}: {}".format(
                self.kind, rt.namespace, rt.name, route_endpoints))
            endpoints.extend(route_endpoints)
        return endpoints
