"""Dashboard refresh events over the channel layer."""
from __future__ import annotations

from typing import Optional

import structlog
from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.utils import timezone

UPDATES_GROUP = 'updates'

logger = structlog.get_logger(__name__)


def notify_dashboard_refresh(reason: str, keys: Optional[list[str]] = None) -> bool:
    """Tell connected dashboards to reload their charts.

    Returns False when no channel layer is configured.
    """
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return False
    now = timezone.now()
    event = {
        'type': 'dashboard.refresh',
        'reason': reason,
        'version': int(now.timestamp()),
        'ts': now.isoformat(),
        'keys': (keys or [])[:50],
    }
    async_to_sync(channel_layer.group_send)(UPDATES_GROUP, event)
    logger.debug('dashboard_refresh_sent', reason=reason, keys=len(event['keys']))
    return True
