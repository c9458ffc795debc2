"""用户账户与健康档案模型."""

from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel, to_snake

HealthRecordType = Literal[
    "consultations",
    "medications",
    "symptoms",
    "allergies",
    "emergency_contacts",
    "medical_history",
]

HEALTH_RECORD_TYPES: tuple[str, ...] = get_args(HealthRecordType)


class _RequestModel(BaseModel):
    """请求体基类（同时接受 snake_case 与 camelCase 字段名）."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterRequest(_RequestModel):
    """注册请求."""

    email: str = Field(min_length=3)
    password: str = Field(min_length=1)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    date_of_birth: str | None = None
    gender: str | None = None
    phone: str | None = None
    district: str | None = None


class LoginRequest(_RequestModel):
    """登录请求."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class ProfileUpdate(_RequestModel):
    """资料更新请求，只更新非空字段."""

    first_name: str | None = None
    last_name: str | None = None
    date_of_birth: str | None = None
    gender: str | None = None
    phone: str | None = None
    district: str | None = None


class HealthRecordRequest(_RequestModel):
    """新增健康档案条目."""

    type: HealthRecordType
    data: dict[str, Any] = Field(default_factory=dict)

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value: Any) -> Any:
        """档案类型同时接受 camelCase（emergencyContacts）."""
        if isinstance(value, str):
            return to_snake(value)
        return value


class SessionUser(BaseModel):
    """登录会话中的用户信息."""

    user_id: str
    email: str
    first_name: str
    last_name: str
    district: str | None = None
