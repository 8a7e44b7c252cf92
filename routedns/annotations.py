"""
Per-object DNS hints carried in ``external-dns.alpha.kubernetes.io/*`` annotations.
"""
from decimal import Decimal
import logging
import re

from .utils import split_list

logger = logging.getLogger(__name__)

ANNOTATION_PREFIX = 'external-dns.alpha.kubernetes.io/'
HOSTNAME_KEY = ANNOTATION_PREFIX + 'hostname'
TARGET_KEY = ANNOTATION_PREFIX + 'target'
TTL_KEY = ANNOTATION_PREFIX + 'ttl'
SET_IDENTIFIER_KEY = ANNOTATION_PREFIX + 'set-identifier'
CONTROLLER_KEY = ANNOTATION_PREFIX + 'controller'
CONTROLLER_VALUE = 'dns-controller'

TTL_MIN = 1
TTL_MAX = 2 ** 31 - 1
# one "<number><unit>" element of a duration such as 1h30m or 1.5h
DURATION_PART_RE = re.compile(r'(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)')
DURATION_UNITS = {
    'ns': Decimal('1e-9'),
    'us': Decimal('1e-6'),
    'µs': Decimal('1e-6'),
    'μs': Decimal('1e-6'),
    'ms': Decimal('1e-3'),
    's': 1,
    'm': 60,
    'h': 3600,
}

# annotation keys passed to providers under their own name
PROVIDER_SPECIFIC_KEYS = (
    ANNOTATION_PREFIX + 'cloudflare-proxied',
    ANNOTATION_PREFIX + 'cloudflare-region-key',
)
# annotation key prefixes mapped to "<provider>/<property>"
PROVIDER_SPECIFIC_PREFIXES = {
    ANNOTATION_PREFIX + 'aws-': 'aws/',
    ANNOTATION_PREFIX + 'scw-': 'scw/',
    ANNOTATION_PREFIX + 'webhook-': 'webhook/',
}


def hostnames(annotations):
    value = (annotations or {}).get(HOSTNAME_KEY)
    if not value:
        return []
    return split_list(value)


def targets(annotations):
    """Return the target override, empty when the Gateway's addresses should be used."""
    value = (annotations or {}).get(TARGET_KEY)
    if not value:
        return []
    return split_list(value)


def parse_ttl(value):
    """
    Parse a TTL given in whole seconds or as a duration.

    A duration is an optionally signed sequence of decimal numbers, each
    with an optional fraction and a unit suffix out of ns, us (or µs),
    ms, s, m and h. The result is truncated to whole seconds.

    >>> parse_ttl('300'), parse_ttl('1h30m'), parse_ttl('1.5h'), parse_ttl('500ms')
    (300, 5400, 5400, 0)
    """
    value = value.strip()
    if value.isdigit():
        return int(value)
    sign, text = 1, value
    if text.startswith(('+', '-')):
        sign, text = (-1 if text[0] == '-' else 1), text[1:]
    if not text:
        raise ValueError("invalid duration {!r}".format(value))
    total, pos = Decimal(0), 0
    while pos < len(text):
        match = DURATION_PART_RE.match(text, pos)
        if match is None:
            raise ValueError("invalid duration {!r}".format(value))
        number, unit = match.groups()
        total += Decimal(number) * DURATION_UNITS[unit]
        pos = match.end()
    return int(sign * total)


def ttl(annotations, resource):
    """Return the record TTL in seconds, 0 meaning the provider default."""
    value = (annotations or {}).get(TTL_KEY)
    if value is None:
        return 0
    try:
        seconds = parse_ttl(value)
    except ValueError:
        logger.warning("{}: TTL annotation {!r} is not a number or a duration".format(
            resource, value))
        return 0
    if not TTL_MIN <= seconds <= TTL_MAX:
        logger.warning("{}: TTL value {} must be between {} and {}".format(
            resource, seconds, TTL_MIN, TTL_MAX))
        return 0
    return seconds


def set_identifier(annotations):
    return (annotations or {}).get(SET_IDENTIFIER_KEY, '')


def provider_specific(annotations):
    """Return the provider-specific (name, value) hints sorted by name."""
    hints = []
    for key, value in (annotations or {}).items():
        if key in PROVIDER_SPECIFIC_KEYS:
            hints.append((key, value))
            continue
        for prefix, provider in PROVIDER_SPECIFIC_PREFIXES.items():
            if key.startswith(prefix) and len(key) > len(prefix):
                hints.append((provider + key[len(prefix):], value))
                break
    return sorted(hints)


def managed_by_us(annotations):
    """Whether no other controller claims the object."""
    value = (annotations or {}).get(CONTROLLER_KEY)
    return value is None or value == CONTROLLER_VALUE
