"""Staff profiles."""
from __future__ import annotations

from typing import Optional

from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework.exceptions import ValidationError

from care.models import Staff
from care.services.colors import color_for
from care.services.pagination import Page, paginate, search_filter

User = get_user_model()

STAFF_SEARCH_FIELDS = ('name', 'phone', 'email')


def format_staff(s: Staff) -> dict:
    return {
        'id': s.id,
        'userId': s.user_id,
        'name': s.name,
        'email': s.email,
        'phone': s.phone,
        'address': s.address,
        'department': s.department,
        'licenseNumber': s.license_number,
        'role': s.role,
        'status': s.status,
        'img': s.img,
        'colorCode': s.color_code,
        'hireDate': s.hire_date.isoformat() if s.hire_date else None,
        'salary': str(s.salary) if s.salary is not None else None,
        'createdAt': s.created_at.isoformat() if s.created_at else None,
    }


def list_staff(*, page=1, limit=None, search: Optional[str]=None) -> tuple[Page, list[dict]]:
    qs = Staff.objects.filter(search_filter(search, STAFF_SEARCH_FIELDS)).order_by('name')
    result = paginate(qs, page, limit)
    return result, [format_staff(s) for s in result.rows]


def create_staff(data: dict) -> Staff:
    data = dict(data)
    password = data.pop('password')
    if User.objects.filter(username=data['email']).exists() or Staff.objects.filter(email=data['email']).exists():
        raise ValidationError({'email': ['an account with this email already exists']})
    data.setdefault('status', 'ACTIVE')
    with transaction.atomic():
        user = User.objects.create_user(
            username=data['email'],
            email=data['email'],
            password=password,
            first_name=data['name'],
            role=data['role'],
        )
        return Staff.objects.create(user=user, color_code=color_for(data['email']), **data)
