from cluster.exceptions import KubeHTTPException
from cluster.resources import Resource


class Namespace(Resource):
    short_name = 'ns'

    def get(self, name=None, ignore_exception=False, **kwargs):
        """
        Fetch a single Namespace or a list
        """
        url = '/namespaces'
        args = []
        if name is not None:
            args.append(name)
            url += '/{}'
            message = 'get Namespace "{}"'
        else:
            message = 'get Namespaces'

        url = self.api(url, *args)
        response = self.http_get(url, params=self.query_params(**kwargs))
        if not ignore_exception and self.unhealthy(response.status_code):
            raise KubeHTTPException(response, message, *args)

        return response
