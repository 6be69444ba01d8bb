import re

from care.logging import bind_request_id, clear_request_context

_REQUEST_ID = re.compile(r'^[A-Za-z0-9._-]{1,64}$')


class RequestContextMiddleware:
    """Tag every log line of a request with its id and echo it back."""
    HEADER = 'X-Request-ID'

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        incoming = request.headers.get(self.HEADER, '')
        request.request_id = bind_request_id(incoming if _REQUEST_ID.match(incoming) else None)
        try:
            response = self.get_response(request)
        finally:
            clear_request_context()
        response[self.HEADER] = request.request_id
        return response
