"""
Resolution of a Route into the hostnames it publishes and their targets.
"""
import logging

from . import annotations
from .exceptions import InvalidSelector
from .fqdn import exec_template
from .hostname import overlap
from .models import (
    GATEWAY_GROUP, GATEWAY_KIND,
    NAMESPACES_FROM_ALL, NAMESPACES_FROM_SAME, NAMESPACES_FROM_SELECTOR,
)
from .protocol import compatible
from .selector import selector_matches
from .utils import unique_targets

logger = logging.getLogger(__name__)


def route_has_parent_ref(route, ref):
    """Return whether ref names one of the parents declared in the Route parentRefs."""
    identity = ref.identity(route.namespace)
    return any(rpr.identity(route.namespace) == identity for rpr in route.parent_refs)


class GatewayRouteResolver(object):
    """
    Resolves Routes against one GatewayIndex.

    The resolver holds no mutable state, Routes of the same snapshot may be
    resolved concurrently.
    """

    def __init__(self, index, gateway_name='', fqdn_template=None,
                 combine_fqdn_annotation=False, ignore_hostname_annotation=False):
        self.index = index
        self.gateway_name = gateway_name
        self.fqdn_template = fqdn_template
        self.combine_fqdn_annotation = combine_fqdn_annotation
        self.ignore_hostname_annotation = ignore_hostname_annotation

    def log(self, route, message, level=logging.DEBUG):
        logger.log(level, "[{} {}/{}]: {}".format(
            route.kind, route.namespace, route.name, message))

    def resolve(self, route):
        """
        Return a dict of hostname to the sorted, unique targets it resolves to.

        Raises RouteResolutionError when the Route's hostnames cannot be computed.
        """
        rt_hosts = self.hosts(route)
        host_targets = {}

        if not route.parent_refs:
            self.log(route, "no parent references found")
            return host_targets

        for rps in route.parents:
            ref = rps.parent_ref
            namespace = ref.namespace_or(route.namespace)
            # status entries are only trusted for parents listed in parentRefs
            if not route_has_parent_ref(route, ref):
                self.log(route, "parent reference {}/{} not found in parentRefs".format(
                    namespace, ref.name))
                continue
            if ref.group != GATEWAY_GROUP or ref.kind != GATEWAY_KIND:
                self.log(route, "unsupported parent {}/{}".format(ref.group, ref.kind))
                continue
            gw = self.index.gateway(namespace, ref.name)
            if gw is None:
                self.log(route, "gateway {}/{} not found".format(namespace, ref.name))
                continue
            if self.gateway_name and self.gateway_name != gw.gateway.name:
                self.log(route, "gateway {}/{} does not match {}".format(
                    namespace, ref.name, self.gateway_name))
                continue
            if not rps.accepted:
                self.log(route, "gateway {}/{} has not accepted the route".format(
                    namespace, ref.name))
                continue

            match = False
            for lis in gw.listeners(ref.section_name):
                if not compatible(route.protocol, lis.protocol):
                    continue
                if ref.port is not None and ref.port != lis.port:
                    continue
                if not self.route_is_allowed(gw.gateway, lis, route):
                    continue
                for rt_host in rt_hosts:
                    # neither side names a host, never publish a catch-all record
                    if lis.hostname == '' and rt_host == '':
                        continue
                    host, ok = overlap(lis.hostname, rt_host)
                    if not ok:
                        continue
                    host_targets.setdefault(host, []).extend(self.targets(gw.gateway))
                    match = True
            if not match:
                self.log(route, "gateway {}/{} section {!r} does not match hostnames {}".format(
                    namespace, ref.name, ref.section_name, rt_hosts))

        # several matching listeners add the same addresses more than once
        return {host: unique_targets(targets) for host, targets in host_targets.items()}

    def targets(self, gateway):
        override = annotations.targets(gateway.annotations)
        if override:
            return override
        return gateway.addresses

    def hosts(self, route):
        """
        Return the candidate hostnames of a Route.

        An empty string is appended when the Route declares no hostnames, it then
        inherits the hostnames of the Listeners it attaches to.
        """
        hostnames = list(route.hostnames)
        if not self.ignore_hostname_annotation:
            hostnames.extend(annotations.hostnames(route.annotations))
        if self.fqdn_template is not None and (not hostnames or self.combine_fqdn_annotation):
            hostnames.extend(exec_template(self.fqdn_template, route))
        if not route.hostnames:
            hostnames.append('')
        return hostnames

    def route_is_allowed(self, gw, lis, route):
        """Return whether the Listener admits the Route by namespace and kind."""
        namespaces_from = lis.namespaces_from
        if namespaces_from == NAMESPACES_FROM_ALL:
            pass
        elif namespaces_from == NAMESPACES_FROM_SAME:
            if gw.namespace != route.namespace:
                return False
        elif namespaces_from == NAMESPACES_FROM_SELECTOR:
            ns = self.index.namespace(route.namespace)
            if ns is None:
                self.log(route, "namespace not found", level=logging.ERROR)
                return False
            try:
                if not selector_matches(lis.namespaces_selector, ns.labels):
                    return False
            except InvalidSelector as e:
                logger.debug("Gateway {}/{} section {!r} has invalid namespace selector: {}".format(
                    gw.namespace, gw.name, lis.name, e))
                return False
        else:
            logger.debug("Gateway {}/{} section {!r} has unknown namespace from {!r}".format(
                gw.namespace, gw.name, lis.name, namespaces_from))
            return False

        kinds = lis.kinds
        if not kinds:
            return True
        return (route.group, route.kind) in kinds
