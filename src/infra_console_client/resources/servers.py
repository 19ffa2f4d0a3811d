"""Servers REST API.

| Method | Request |
|---|---|
| `list()` | GET /servers |
| `get(id)` | GET /servers/{id} |
| `create(payload)` | POST /servers |
| `update(id, payload)` | PUT /servers/{id} |
| `delete(id)` | DELETE /servers/{id} |
| `batch_delete(ids)` | POST /servers/batch-delete |
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote

from infra_console_client.errors.models import Envelope
from infra_console_client.transport.pipeline import InterceptorPipeline

COLLECTION_PATH = "/servers"


def _item_path(server_id: int | str) -> str:
    return f"{COLLECTION_PATH}/{quote(str(server_id), safe='')}"


class ServersAPI:
    def __init__(self, pipeline: InterceptorPipeline):
        self._pipeline = pipeline

    async def list(self) -> Envelope:
        """List servers, newest first. ``data`` is a list of server objects."""
        return await self._pipeline.get(COLLECTION_PATH)

    async def get(self, server_id: int | str) -> Envelope:
        return await self._pipeline.get(_item_path(server_id))

    async def create(self, payload: Mapping[str, Any]) -> Envelope:
        """Create a server. ``data`` is the stored server including its new id."""
        return await self._pipeline.post(COLLECTION_PATH, dict(payload))

    async def update(self, server_id: int | str, payload: Mapping[str, Any]) -> Envelope:
        """Update a server; only the fields in ``payload`` change."""
        return await self._pipeline.put(_item_path(server_id), dict(payload))

    async def delete(self, server_id: int | str) -> Envelope:
        return await self._pipeline.delete(_item_path(server_id))

    async def batch_delete(self, server_ids: Iterable[int]) -> Envelope:
        """Delete several servers at once. ``data`` is ``{"deleted": <count>}``.

        Raises:
            ValueError: If no ids are given; no request is sent in that case.
        """
        ids = list(server_ids)
        if not ids:
            raise ValueError("batch_delete requires at least one server id")
        return await self._pipeline.post(f"{COLLECTION_PATH}/batch-delete", {"ids": ids})
