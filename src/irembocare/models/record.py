"""键值记录存储模型."""

from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


class StoredRecord(SQLModel, table=True):
    """键值记录（用户、会话、健康档案）."""

    __tablename__ = "records"  # type: ignore[assignment]

    namespace: str = Field(primary_key=True, description="命名空间: users|sessions|health_records")
    key: str = Field(primary_key=True, description="记录键")
    value: str = Field(description="记录内容 (JSON)")
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
