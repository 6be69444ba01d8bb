"""Persisted audit trail."""
from __future__ import annotations

from typing import Optional, Any, Dict

import structlog
from django.contrib.auth import get_user_model

from care.models import AuditEvent

User = get_user_model()
logger = structlog.get_logger(__name__)


def log_action(*, user: Optional[User], action: str, object_type: Optional[str]=None, object_id: Optional[Any]=None, detail: Optional[Dict[str, Any]]=None) -> AuditEvent:
    logger.info('audit', action=action, user_id=getattr(user, 'id', None), object_type=object_type, object_id=object_id)
    return AuditEvent.objects.create(
        user=user if isinstance(user, User) or getattr(user, 'id', None) else None,
        action=action,
        object_type=object_type,
        object_id=str(object_id) if object_id is not None else None,
        detail=detail or {},
    )
