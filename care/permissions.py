"""
Role based permission classes.

Roles mirror the route access table of the clinic front-end:
administrators manage everything, doctors and staff work with patients
and appointments, patients only see their own data.
"""
from rest_framework.permissions import BasePermission

from care.models import Role

CLINICAL_ROLES = {Role.ADMIN, Role.DOCTOR, Role.STAFF}


def _role(request):
    user = getattr(request, "user", None)
    if not (user and user.is_authenticated):
        return None
    return getattr(user, "role", None)


class IsAdminRole(BasePermission):
    """Allow access only to administrators."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return _role(request) == Role.ADMIN


class IsDoctorRole(BasePermission):
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return _role(request) == Role.DOCTOR


class IsClinicalRole(BasePermission):
    """Administrators, doctors and staff."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return _role(request) in CLINICAL_ROLES


class IsPatientRole(BasePermission):
    """Allow access only to users with the patient role."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return _role(request) == Role.PATIENT
