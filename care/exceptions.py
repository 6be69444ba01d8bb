import structlog
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = structlog.get_logger(__name__)


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        view = context.get('view')
        logger.exception('unhandled_api_error', view=getattr(view, '__name__', type(view).__name__))
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': 'Internal Server Error'}}, status=500)
    # normalize response
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = resp.data
    code = getattr(exc, 'default_code', None) or 'api_error'
    return Response({'ok': False, 'error': {'code': code, 'message': detail}}, status=resp.status_code, headers=_passthrough_headers(resp))


def _passthrough_headers(resp):
    return {k: v for k, v in resp.headers.items() if k in ('WWW-Authenticate', 'Retry-After')}
