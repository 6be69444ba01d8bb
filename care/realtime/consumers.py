import json

from channels.generic.websocket import AsyncWebsocketConsumer

from care.services.broadcast import UPDATES_GROUP


class DashboardUpdatesConsumer(AsyncWebsocketConsumer):
    GROUP = UPDATES_GROUP

    async def connect(self):
        await self.channel_layer.group_add(self.GROUP, self.channel_name)
        await self.accept()
        await self.send(json.dumps({"type": "welcome", "message": "connected"}))

    async def disconnect(self, close_code):
        await self.channel_layer.group_discard(self.GROUP, self.channel_name)

    async def dashboard_refresh(self, event):
        # event: {"type": "dashboard.refresh", "reason": str, "version": int, "ts": "...", "keys": [...]}
        await self.send(json.dumps(event))
