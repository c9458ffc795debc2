"""测试键值存储和账户服务."""

import pytest

from irembocare.core.accounts import (
    HEALTH_RECORDS,
    USERS,
    AccountExistsError,
    AccountNotFoundError,
    AccountService,
    InvalidCredentialsError,
    hash_password,
)
from irembocare.core.store import KeyValueStore
from irembocare.models.account import (
    HEALTH_RECORD_TYPES,
    HealthRecordRequest,
    ProfileUpdate,
    RegisterRequest,
)


def _register_request(**overrides) -> RegisterRequest:
    data = {
        "email": "jane@example.rw",
        "password": "secret",
        "firstName": "Jane",
        "lastName": "Uwase",
        "district": "Kigali",
    }
    data.update(overrides)
    return RegisterRequest.model_validate(data)


@pytest.fixture
def accounts(store: KeyValueStore) -> AccountService:
    return AccountService(store)


class TestKeyValueStore:
    """测试 KeyValueStore."""

    async def test_get_missing(self, store: KeyValueStore) -> None:
        """不存在的键返回 None."""
        assert await store.get("users", "nobody") is None

    async def test_set_and_overwrite(self, store: KeyValueStore) -> None:
        """写入后可读取，再次写入覆盖."""
        await store.set("users", "a", {"n": 1})
        assert await store.get("users", "a") == {"n": 1}

        await store.set("users", "a", {"n": 2})
        assert await store.get("users", "a") == {"n": 2}

    async def test_namespaces_are_isolated(self, store: KeyValueStore) -> None:
        """不同命名空间的同名键互不影响."""
        await store.set("users", "k", {"v": "user"})
        await store.set("sessions", "k", {"v": "session"})

        assert await store.get("users", "k") == {"v": "user"}
        assert await store.get("sessions", "k") == {"v": "session"}

    async def test_delete(self, store: KeyValueStore) -> None:
        """删除返回是否存在."""
        await store.set("sessions", "t", {"x": 1})
        assert await store.delete("sessions", "t") is True
        assert await store.get("sessions", "t") is None
        assert await store.delete("sessions", "t") is False


class TestAccountService:
    """测试 AccountService."""

    async def test_register_hides_password(
        self, accounts: AccountService, store: KeyValueStore
    ) -> None:
        """注册返回的资料不含密码，存储的是哈希."""
        profile = await accounts.register(_register_request())

        assert "password" not in profile
        assert profile["first_name"] == "Jane"
        stored = await store.get(USERS, "jane@example.rw")
        assert stored is not None
        assert stored["password"] == hash_password("secret")

    async def test_register_creates_empty_records(
        self, accounts: AccountService, store: KeyValueStore
    ) -> None:
        """注册时初始化六类空档案."""
        profile = await accounts.register(_register_request())
        records = await store.get(HEALTH_RECORDS, profile["id"])
        assert records == {record_type: [] for record_type in HEALTH_RECORD_TYPES}

    async def test_duplicate_email(self, accounts: AccountService) -> None:
        """重复邮箱报错."""
        await accounts.register(_register_request())
        with pytest.raises(AccountExistsError):
            await accounts.register(_register_request())

    async def test_login_and_session(self, accounts: AccountService) -> None:
        """登录生成会话 token，可据此取回用户."""
        await accounts.register(_register_request())
        token, profile = await accounts.login("jane@example.rw", "secret")

        assert len(token) == 64
        assert profile["last_login"] is not None

        user = await accounts.get_session_user(token)
        assert user is not None
        assert user.email == "jane@example.rw"
        assert user.user_id == profile["id"]

    async def test_login_wrong_password(self, accounts: AccountService) -> None:
        """密码错误."""
        await accounts.register(_register_request())
        with pytest.raises(InvalidCredentialsError):
            await accounts.login("jane@example.rw", "wrong")

    async def test_login_unknown_user(self, accounts: AccountService) -> None:
        """用户不存在也报凭据错误."""
        with pytest.raises(InvalidCredentialsError):
            await accounts.login("ghost@example.rw", "secret")

    async def test_logout(self, accounts: AccountService) -> None:
        """注销后会话失效."""
        await accounts.register(_register_request())
        token, _ = await accounts.login("jane@example.rw", "secret")

        assert await accounts.logout(token) is True
        assert await accounts.get_session_user(token) is None

    async def test_update_profile_ignores_empty_fields(self, accounts: AccountService) -> None:
        """只更新非空字段."""
        await accounts.register(_register_request())
        profile = await accounts.update_profile(
            "jane@example.rw",
            ProfileUpdate(phone="+250788000000", first_name=""),
        )

        assert profile["phone"] == "+250788000000"
        assert profile["first_name"] == "Jane"

    async def test_profile_not_found(self, accounts: AccountService) -> None:
        with pytest.raises(AccountNotFoundError):
            await accounts.get_profile("ghost@example.rw")

    async def test_add_health_record(self, accounts: AccountService) -> None:
        """新增档案带 id 和创建时间."""
        profile = await accounts.register(_register_request())
        entry = await accounts.add_health_record(
            profile["id"], "allergies", {"substance": "penicillin"}
        )

        assert entry["substance"] == "penicillin"
        assert "id" in entry
        assert "created_at" in entry

        records = await accounts.get_health_records(profile["id"])
        assert records["allergies"] == [entry]
        assert records["medications"] == []

    async def test_unknown_record_type(self, accounts: AccountService) -> None:
        with pytest.raises(ValueError, match="未知档案类型"):
            await accounts.add_health_record("user-1", "dreams", {})


class TestHealthRecordRequest:
    """测试档案类型解析."""

    def test_types_come_from_literal(self) -> None:
        assert "emergency_contacts" in HEALTH_RECORD_TYPES
        assert len(HEALTH_RECORD_TYPES) == 6

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("emergencyContacts", "emergency_contacts"),
            ("medicalHistory", "medical_history"),
            ("medical_history", "medical_history"),
            ("allergies", "allergies"),
        ],
    )
    def test_camel_case_type_is_normalized(self, value: str, expected: str) -> None:
        request = HealthRecordRequest.model_validate({"type": value, "data": {}})
        assert request.type == expected
