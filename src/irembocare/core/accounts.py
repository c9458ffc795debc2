"""用户账户服务."""

import hashlib
import logging
import secrets
import uuid
from datetime import UTC, datetime
from typing import Any

from irembocare.core.store import KeyValueStore
from irembocare.models.account import (
    HEALTH_RECORD_TYPES,
    ProfileUpdate,
    RegisterRequest,
    SessionUser,
)

logger = logging.getLogger(__name__)

USERS = "users"
SESSIONS = "sessions"
HEALTH_RECORDS = "health_records"

# 对外返回的资料字段（不含密码）
PROFILE_FIELDS = (
    "id",
    "email",
    "first_name",
    "last_name",
    "date_of_birth",
    "gender",
    "phone",
    "district",
    "created_at",
    "last_login",
)


class AccountError(Exception):
    """账户操作错误."""


class AccountExistsError(AccountError):
    """邮箱已注册."""


class InvalidCredentialsError(AccountError):
    """邮箱或密码错误."""


class AccountNotFoundError(AccountError):
    """用户不存在."""


def hash_password(password: str) -> str:
    """密码哈希."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def empty_health_records() -> dict[str, list[dict[str, Any]]]:
    """空健康档案."""
    return {record_type: [] for record_type in HEALTH_RECORD_TYPES}


def public_profile(user: dict[str, Any]) -> dict[str, Any]:
    """去掉敏感字段的用户资料."""
    return {key: user.get(key) for key in PROFILE_FIELDS}


class AccountService:
    """注册、登录、资料和健康档案."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    async def register(self, request: RegisterRequest) -> dict[str, Any]:
        """注册新用户并初始化空健康档案."""
        if await self.store.get(USERS, request.email):
            msg = f"邮箱已注册: {request.email}"
            raise AccountExistsError(msg)

        user_id = str(uuid.uuid4())
        user = {
            "id": user_id,
            "email": request.email,
            "password": hash_password(request.password),
            "first_name": request.first_name,
            "last_name": request.last_name,
            "date_of_birth": request.date_of_birth,
            "gender": request.gender,
            "phone": request.phone,
            "district": request.district,
            "created_at": datetime.now(UTC).isoformat(),
            "last_login": None,
        }
        await self.store.set(USERS, request.email, user)
        await self.store.set(HEALTH_RECORDS, user_id, empty_health_records())

        logger.info(f"新用户注册: {user_id}")
        return public_profile(user)

    async def login(self, email: str, password: str) -> tuple[str, dict[str, Any]]:
        """登录，返回 (会话 token, 用户资料)."""
        user = await self.store.get(USERS, email)
        if not user or user["password"] != hash_password(password):
            msg = "邮箱或密码错误"
            raise InvalidCredentialsError(msg)

        token = secrets.token_hex(32)
        session_user = SessionUser(
            user_id=user["id"],
            email=user["email"],
            first_name=user["first_name"],
            last_name=user["last_name"],
            district=user.get("district"),
        )
        await self.store.set(SESSIONS, token, session_user.model_dump())

        user["last_login"] = datetime.now(UTC).isoformat()
        await self.store.set(USERS, email, user)

        return token, public_profile(user)

    async def logout(self, token: str) -> bool:
        """注销会话."""
        return await self.store.delete(SESSIONS, token)

    async def get_session_user(self, token: str) -> SessionUser | None:
        """根据 token 获取会话用户."""
        data = await self.store.get(SESSIONS, token)
        if data is None:
            return None
        return SessionUser.model_validate(data)

    async def get_profile(self, email: str) -> dict[str, Any]:
        """获取用户资料."""
        user = await self.store.get(USERS, email)
        if not user:
            msg = f"用户不存在: {email}"
            raise AccountNotFoundError(msg)
        return public_profile(user)

    async def update_profile(self, email: str, update: ProfileUpdate) -> dict[str, Any]:
        """更新资料（只覆盖非空字段）."""
        user = await self.store.get(USERS, email)
        if not user:
            msg = f"用户不存在: {email}"
            raise AccountNotFoundError(msg)

        for field, value in update.model_dump(exclude_none=True).items():
            if value:
                user[field] = value

        await self.store.set(USERS, email, user)
        return public_profile(user)

    async def get_health_records(self, user_id: str) -> dict[str, list[dict[str, Any]]]:
        """获取健康档案."""
        records = await self.store.get(HEALTH_RECORDS, user_id)
        return records or empty_health_records()

    async def add_health_record(
        self,
        user_id: str,
        record_type: str,
        data: dict[str, Any],
    ) -> dict[str, Any]:
        """新增一条健康档案."""
        if record_type not in HEALTH_RECORD_TYPES:
            msg = f"未知档案类型: {record_type}"
            raise ValueError(msg)

        records = await self.get_health_records(user_id)
        entry = {
            **data,
            "id": str(uuid.uuid4()),
            "created_at": datetime.now(UTC).isoformat(),
        }
        records.setdefault(record_type, []).append(entry)
        await self.store.set(HEALTH_RECORDS, user_id, records)
        return entry
