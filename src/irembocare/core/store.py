"""键值存储."""

import json
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from irembocare.models.record import StoredRecord


class KeyValueStore:
    """基于数据库会话的键值存储，记录按命名空间隔离."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, namespace: str, key: str) -> dict[str, Any] | None:
        """读取记录，不存在返回 None."""
        record = await self.session.get(StoredRecord, (namespace, key))
        if record is None:
            return None
        return json.loads(record.value)

    async def set(self, namespace: str, key: str, value: dict[str, Any]) -> None:
        """写入记录（存在则覆盖）."""
        data = json.dumps(value, ensure_ascii=False, default=str)
        record = await self.session.get(StoredRecord, (namespace, key))
        if record:
            record.value = data
            record.updated_at = datetime.now(UTC)
        else:
            self.session.add(StoredRecord(namespace=namespace, key=key, value=data))
        await self.session.commit()

    async def delete(self, namespace: str, key: str) -> bool:
        """删除记录，返回是否存在."""
        record = await self.session.get(StoredRecord, (namespace, key))
        if record is None:
            return False
        await self.session.delete(record)
        await self.session.commit()
        return True
