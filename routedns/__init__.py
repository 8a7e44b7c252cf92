"""
The **routedns** package derives DNS records from Gateway API routing intent.

Given a snapshot of Gateways, Namespaces and a Route it computes the hostnames the
Route publishes and the targets each hostname resolves to.
"""
from .index import GatewayIndex
from .resolver import GatewayRouteResolver

__version__ = '0.4.0'
__all__ = ('GatewayIndex', 'GatewayRouteResolver')
