"""
Conversion of a resolved hostname and its targets into DNS endpoints.
"""
import ipaddress

RECORD_TYPE_A = 'A'
RECORD_TYPE_AAAA = 'AAAA'
RECORD_TYPE_CNAME = 'CNAME'

RESOURCE_LABEL_KEY = 'resource'


class Endpoint(object):
    """A DNS record a provider should hold."""

    def __init__(self, dns_name, targets, record_type, record_ttl=0,
                 set_identifier='', provider_specific=None, labels=None):
        self.dns_name = dns_name
        self.targets = targets
        self.record_type = record_type
        self.record_ttl = record_ttl
        self.set_identifier = set_identifier
        self.provider_specific = provider_specific or []
        self.labels = labels or {}

    def __repr__(self):
        return '{} {} IN {} {} {}'.format(
            self.dns_name, self.record_ttl, self.record_type, self.set_identifier,
            ';'.join(self.targets))

    def __eq__(self, other):
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self):
        return {
            'dnsName': self.dns_name,
            'targets': list(self.targets),
            'recordType': self.record_type,
            'recordTTL': self.record_ttl,
            'setIdentifier': self.set_identifier,
            'providerSpecific': [
                {'name': name, 'value': value} for name, value in self.provider_specific],
            'labels': dict(self.labels),
        }


def record_type(target):
    try:
        address = ipaddress.ip_address(target)
    except ValueError:
        return RECORD_TYPE_CNAME
    return RECORD_TYPE_AAAA if address.version == 6 else RECORD_TYPE_A


def endpoints_for_hostname(hostname, targets, ttl=0, provider_specific=None,
                           set_identifier='', resource=''):
    """Return one endpoint per record type found among the targets."""
    grouped = {RECORD_TYPE_A: [], RECORD_TYPE_AAAA: [], RECORD_TYPE_CNAME: []}
    for target in targets:
        grouped[record_type(target)].append(target)

    endpoints = []
    for rtype in (RECORD_TYPE_A, RECORD_TYPE_AAAA, RECORD_TYPE_CNAME):
        if not grouped[rtype]:
            continue
        labels = {RESOURCE_LABEL_KEY: resource} if resource else {}
        endpoints.append(Endpoint(
            hostname, grouped[rtype], rtype,
            record_ttl=ttl,
            set_identifier=set_identifier,
            provider_specific=provider_specific,
            labels=labels,
        ))
    return endpoints
