HTTP = 'HTTP'
HTTPS = 'HTTPS'
TLS = 'TLS'
TCP = 'TCP'
UDP = 'UDP'

PROTOCOLS = (HTTP, HTTPS, TLS, TCP, UDP)


def compatible(route_protocol, listener_protocol):
    """
    Return whether a Route protocol can attach to a Listener protocol.

    HTTP and HTTPS are the same protocol here. A TLS Listener also accepts TCP
    Routes, the reverse is not true.
    """
    if route_protocol == HTTPS:
        route_protocol = HTTP
    if listener_protocol == HTTPS:
        listener_protocol = HTTP
    if route_protocol == TCP and listener_protocol == TLS:
        listener_protocol = TCP
    return route_protocol == listener_protocol
