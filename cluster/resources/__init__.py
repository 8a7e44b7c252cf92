from cluster import KubeHTTPClient, get_k8s_session


class ResourceRegistry(type):
    """
    A registry of all concrete Resources subclassed
    """
    def __init__(cls, name, bases, nmspc):
        super().__init__(name, bases, nmspc)
        if not hasattr(cls, 'registry'):
            cls.registry = []
        if not nmspc.get('abstract', False):
            cls.registry.append(cls)

    # Metamethods, called on class objects:
    def __iter__(cls):
        return iter(cls.registry)


class Resource(KubeHTTPClient, metaclass=ResourceRegistry):
    abstract = True
    short_name = None

    def __init__(self, url, k8s_api_verify_tls=True):
        # resources share the session but never build a resource mapping of their own
        self.url = url
        self.k8s_api_verify_tls = k8s_api_verify_tls
        self.session = get_k8s_session(self.k8s_api_verify_tls)

    def items(self, response):
        """Return the decoded objects of a list response."""
        return response.json().get('items') or []


from cluster.resources import gateway, namespace  # noqa: E402,F401
