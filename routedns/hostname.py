"""
Hostname validation and matching.

Hostnames prefixed with a wildcard label (``*.``) are interpreted as a suffix match:
``*.example.com`` matches ``test.example.com`` and ``foo.test.example.com`` but not
``example.com``. The empty string stands for "any hostname".
"""
import ipaddress
import string

WILDCARD_PREFIX = '*.'
ALPHANUM = frozenset(string.ascii_letters + string.digits)


def is_ip_addr(value):
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def is_dns1123_label(value):
    """Return whether value is a valid domain label according to RFC 1123."""
    n = len(value)
    if n == 0 or n > 63:
        return False
    if value[0] not in ALPHANUM or value[-1] not in ALPHANUM:
        return False
    return all(c == '-' or c in ALPHANUM for c in value[1:-1])


def is_dns1123_domain(value):
    """Return whether value is a valid domain name according to RFC 1123."""
    if not 0 < len(value) <= 255:
        return False
    # a fully-qualified name may end in the root label
    if value.endswith('.'):
        value = value[:-1]
    return all(is_dns1123_label(label) for label in value.split('.'))


def canonicalize(host):
    """
    Return the canonical host and whether it is valid.

    >>> canonicalize('*.Example.COM')
    ('*.example.com', True)
    >>> canonicalize('10.0.0.1')
    ('', False)
    """
    if host == '':
        return '', True
    if host.startswith(WILDCARD_PREFIX):
        domain = host[len(WILDCARD_PREFIX):]
    else:
        domain = host
    if is_ip_addr(host) or not is_dns1123_domain(domain):
        return '', False
    # only ASCII letters survive validation
    return host.lower(), True


def overlap(a, b):
    """
    Return the most specific overlapping host of a and b and whether one was found.

    Both empty is not a match, an unconstrained Route on an unconstrained Listener
    must not publish a catch-all record.
    """
    a, ok = canonicalize(a)
    if not ok:
        return '', False
    b, ok = canonicalize(b)
    if not ok:
        return '', False

    if a == '' and b == '':
        return '', False
    if a == '':
        return b, True
    if b == '' or a == b:
        return a, True
    # a becomes the shorter (or, on equal length, the wildcard) pattern
    if len(b) < len(a) or (len(a) == len(b) and b.startswith(WILDCARD_PREFIX)):
        a, b = b, a
    if a.startswith(WILDCARD_PREFIX) and b.endswith(a[1:]):
        return b, True
    return '', False
