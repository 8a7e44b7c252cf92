"""
Label selector evaluation.

Two forms are understood. Listener admission policies carry Kubernetes
LabelSelector objects (``matchLabels``/``matchExpressions``). Filters configured on
a source use the dict form the cluster client encodes into ``labelSelector`` query
parameters:

* ``{'app': 'web'}`` the label equals a value
* ``{'tier__in': ['a', 'b']}`` or ``{'tier': ['a', 'b']}`` the label is one of the values
* ``{'env__notin': ['dev']}`` the label is missing or not one of the values
* ``{'managed': None}`` the label exists
* ``{'legacy__notexists': None}`` the label does not exist
"""
from .exceptions import InvalidSelector
from .schemas.label_selector import SCHEMA as LABEL_SELECTOR_SCHEMA
from .utils import validate_json


def selector_matches(selector, labels):
    """
    Return whether labels satisfy a Kubernetes LabelSelector.

    An empty selector matches everything. Raises InvalidSelector when the selector
    is malformed.
    """
    if selector is None:
        raise InvalidSelector("a label selector is required")
    validate_json(selector, LABEL_SELECTOR_SCHEMA, InvalidSelector)
    labels = labels or {}
    for key, value in (selector.get('matchLabels') or {}).items():
        if labels.get(key) != value:
            return False
    for expr in selector.get('matchExpressions') or []:
        key, operator, values = expr['key'], expr['operator'], expr.get('values') or []
        if operator == 'In':
            if key not in labels or labels[key] not in values:
                return False
        elif operator == 'NotIn':
            if key in labels and labels[key] in values:
                return False
        elif operator == 'Exists':
            if key not in labels:
                return False
        elif key in labels:  # DoesNotExist
            return False
    return True


def filter_matches(filters, labels):
    """Return whether labels (or annotations) satisfy a dict form filter."""
    labels = labels or {}
    for key, value in (filters or {}).items():
        if '__notin' in key:
            if labels.get(key.replace('__notin', '')) in value:
                return False
        elif '__notexists' in key:
            if key.replace('__notexists', '') in labels:
                return False
        elif '__in' in key or isinstance(value, list):
            key = key.replace('__in', '')
            if key not in labels or labels[key] not in value:
                return False
        elif value is None:
            if key not in labels:
                return False
        elif labels.get(key) != value:
            return False
    return True


def _split_requirements(text):
    requirements, depth, current = [], 0, ''
    for c in text:
        if c == '(':
            depth += 1
        elif c == ')':
            depth -= 1
            if depth < 0:
                raise InvalidSelector("unbalanced parenthesis in {!r}".format(text))
        if c == ',' and depth == 0:
            requirements.append(current.strip())
            current = ''
        else:
            current += c
    if depth != 0:
        raise InvalidSelector("unbalanced parenthesis in {!r}".format(text))
    requirements.append(current.strip())
    return [req for req in requirements if req]


def _parse_values(text, requirement):
    text = text.strip()
    if not (text.startswith('(') and text.endswith(')')):
        raise InvalidSelector("expected a value set in {!r}".format(requirement))
    values = [value.strip() for value in text[1:-1].split(',') if value.strip()]
    if not values:
        raise InvalidSelector("empty value set in {!r}".format(requirement))
    return values


def parse_selector(text):
    """
    Parse the string form of a label selector into the dict form.

    >>> parse_selector('app=web,tier in (a, b),!legacy')
    {'app': 'web', 'tier__in': ['a', 'b'], 'legacy__notexists': None}
    """
    filters = {}
    for req in _split_requirements(text or ''):
        if ' notin ' in req or ' notin(' in req:
            key, _, values = req.partition('notin')
            filters[key.strip() + '__notin'] = _parse_values(values, req)
        elif ' in ' in req or ' in(' in req:
            key, _, values = req.partition(' in')
            filters[key.strip() + '__in'] = _parse_values(values, req)
        elif '!=' in req:
            key, _, value = req.partition('!=')
            filters[key.strip() + '__notin'] = [value.strip()]
        elif '=' in req:
            key, _, value = req.replace('==', '=').partition('=')
            filters[key.strip()] = value.strip()
        elif req.startswith('!'):
            filters[req[1:].strip() + '__notexists'] = None
        else:
            filters[req] = None
    for key in filters:
        if not key.split('__')[0]:
            raise InvalidSelector("missing label key in {!r}".format(text))
    return filters
