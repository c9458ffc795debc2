"""用户账户与健康档案 API."""

from fastapi import APIRouter, Depends, HTTPException

from irembocare.api.deps import get_account_service, get_bearer_token, get_current_user
from irembocare.core.accounts import (
    AccountExistsError,
    AccountNotFoundError,
    AccountService,
    InvalidCredentialsError,
)
from irembocare.models.account import (
    HealthRecordRequest,
    LoginRequest,
    ProfileUpdate,
    RegisterRequest,
    SessionUser,
)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", status_code=201)
async def register(
    request: RegisterRequest,
    accounts: AccountService = Depends(get_account_service),
) -> dict:
    """注册."""
    try:
        user = await accounts.register(request)
    except AccountExistsError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e

    return {"success": True, "message": "Registration successful", "user": user}


@router.post("/login")
async def login(
    request: LoginRequest,
    accounts: AccountService = Depends(get_account_service),
) -> dict:
    """登录."""
    try:
        token, user = await accounts.login(request.email, request.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=401, detail=str(e)) from e

    return {"success": True, "token": token, "user": user}


@router.post("/logout")
async def logout(
    token: str = Depends(get_bearer_token),
    accounts: AccountService = Depends(get_account_service),
) -> dict:
    """注销."""
    await accounts.logout(token)
    return {"success": True, "message": "Logged out"}


@router.get("/profile")
async def get_profile(
    user: SessionUser = Depends(get_current_user),
    accounts: AccountService = Depends(get_account_service),
) -> dict:
    """获取个人资料."""
    try:
        profile = await accounts.get_profile(user.email)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    return {"success": True, "user": profile}


@router.put("/profile")
async def update_profile(
    update: ProfileUpdate,
    user: SessionUser = Depends(get_current_user),
    accounts: AccountService = Depends(get_account_service),
) -> dict:
    """更新个人资料."""
    try:
        profile = await accounts.update_profile(user.email, update)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    return {"success": True, "user": profile}


@router.get("/health-records")
async def get_health_records(
    user: SessionUser = Depends(get_current_user),
    accounts: AccountService = Depends(get_account_service),
) -> dict:
    """获取健康档案."""
    records = await accounts.get_health_records(user.user_id)
    return {"success": True, "data": records}


@router.post("/health-records", status_code=201)
async def add_health_record(
    request: HealthRecordRequest,
    user: SessionUser = Depends(get_current_user),
    accounts: AccountService = Depends(get_account_service),
) -> dict:
    """新增健康档案条目."""
    try:
        entry = await accounts.add_health_record(user.user_id, request.type, request.data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return {"success": True, "data": entry}
