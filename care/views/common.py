"""Helpers shared by the list endpoints."""
from rest_framework.exceptions import NotFound, PermissionDenied
from rest_framework.response import Response

from care.models import Role
from care.serializers.general import ListQuerySerializer
from care.services.pagination import Page
from care.services.patients import patient_for_user


def list_params(request) -> dict:
    q = ListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    vd = q.validated_data
    return {
        'page': vd.get('page') or 1,
        'limit': vd.get('limit') or None,
        'search': (vd.get('search') or '').strip() or None,
        'id': (vd.get('id') or '').strip() or None,
    }


def paged_response(page: Page, data: list) -> Response:
    return Response(page.as_payload(data))


def own_patient_profile(request):
    """The caller's patient profile; 404 when a patient has not registered yet."""
    patient = patient_for_user(request.user)
    if patient is None:
        raise NotFound('Patient data not found')
    return patient


def ensure_patient_access(request, patient_id: str) -> None:
    """Clinical roles see any patient; patients only themselves."""
    role = getattr(request.user, 'role', None)
    if role in (Role.ADMIN, Role.DOCTOR, Role.STAFF):
        return
    if role == Role.PATIENT and own_patient_profile(request).id == patient_id:
        return
    raise PermissionDenied('forbidden for this patient')
