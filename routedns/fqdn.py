"""
Hostname templates.

Templates use ``string.Template`` placeholders, ``${name}.${namespace}.example.com``,
and may expand to several comma-separated hostnames.
"""
import string

from .exceptions import FQDNTemplateError
from .utils import split_list


class _AnyVariable(dict):

    def __missing__(self, key):
        return ''


def parse_template(text):
    """Return the parsed template, or None when text is empty."""
    if not text or not text.strip():
        return None
    template = string.Template(text)
    try:
        template.substitute(_AnyVariable())
    except ValueError as e:
        raise FQDNTemplateError("invalid fqdn template {!r}: {}".format(text, e)) from e
    return template


def template_context(obj):
    return {
        'name': obj.name,
        'namespace': obj.namespace,
        'kind': obj.kind,
    }


def exec_template(template, obj):
    """Expand template against a Kubernetes object and return the hostnames."""
    try:
        value = template.substitute(template_context(obj))
    except (KeyError, ValueError) as e:
        raise FQDNTemplateError(
            "failed to expand fqdn template {!r} for {} {}/{}: {}".format(
                template.template, obj.kind, obj.namespace, obj.name, e)) from e
    return split_list(value)
