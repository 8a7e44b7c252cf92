class RouteDNSError(Exception):
    """Base class of the errors raised by routedns."""


class RouteResolutionError(RouteDNSError):
    """A single Route could not be resolved; other Routes are unaffected."""


class FQDNTemplateError(RouteResolutionError):
    pass


class InvalidSelector(RouteDNSError):
    pass


class UnsupportedRouteKind(RouteDNSError):
    def __init__(self, kind):
        self.kind = kind
        super().__init__("unsupported route kind: {}".format(kind))
