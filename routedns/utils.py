"""
Helper functions used by the resolver.
"""
import jsonschema


def str_val(value, default):
    """Return value, or default when it is unset or empty."""
    if not value:
        return default
    return value


def unique_targets(targets):
    """
    Return the sorted targets without duplicates.

    >>> unique_targets(['10.0.0.2', '10.0.0.1', '10.0.0.2'])
    ['10.0.0.1', '10.0.0.2']
    """
    if len(targets) < 2:
        return targets
    targets = sorted(targets)
    unique = [targets[0]]
    for target in targets[1:]:
        if target != unique[-1]:
            unique.append(target)
    return unique


def split_list(value):
    """
    Split a comma-separated annotation or template value.

    >>> split_list(' a.example.com., ,b.example.com')
    ['a.example.com', 'b.example.com']
    """
    items = []
    for item in value.split(','):
        item = item.strip()
        if item.endswith('.'):
            item = item[:-1]
        if item:
            items.append(item)
    return items


def to_bool(value):
    return str(value).lower() == 'true'


def validate_json(value, schema, raise_exception=ValueError):
    if value is not None:
        try:
            jsonschema.validate(value, schema)
        except jsonschema.ValidationError as e:
            raise raise_exception("could not validate {}: {}".format(value, e.message))
    return value
