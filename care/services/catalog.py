"""The catalogue of billable services."""
from __future__ import annotations

from care.models import Service


def format_service(s: Service) -> dict:
    return {
        'id': s.id,
        'serviceName': s.service_name,
        'description': s.description,
        'price': str(s.price),
        'category': s.category,
        'duration': s.duration,
        'isAvailable': s.is_available,
    }


def list_services() -> list[dict]:
    return [format_service(s) for s in Service.objects.order_by('service_name')]


def create_service(data: dict) -> Service:
    return Service.objects.create(**data)
