from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from ideabank.config import AUTH_RATE_LIMIT
from ideabank.database import get_async_session
from ideabank.deps.auth import get_current_claims
from ideabank.limiter import limiter
from ideabank.schemas.user_schemas import (
    UserCreate,
    UserLogin,
    UserOut,
    RegisterResponse,
    LoginResponse,
)
from ideabank.services import auth_service
from ideabank.utils.token_utils import TokenClaims

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(AUTH_RATE_LIMIT)
async def register(request: Request, user: UserCreate, db: AsyncSession = Depends(get_async_session)):
    user_id = await auth_service.register(
        db,
        nome=user.nome,
        email=user.email,
        password=user.password,
        nascimento=user.nascimento,
        telefone=user.telefone,
        instagram_username=user.instagram_username,
    )
    return RegisterResponse(message="Usuário criado", id=user_id)


@router.post("/login", response_model=LoginResponse)
@limiter.limit(AUTH_RATE_LIMIT)
async def login(request: Request, user: UserLogin, db: AsyncSession = Depends(get_async_session)):
    token, db_user = await auth_service.login(db, user.email, user.password)
    return LoginResponse(token=token, user=UserOut.model_validate(db_user))


@router.get("/me", response_model=UserOut)
async def me(
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_async_session),
):
    return await auth_service.me(db, claims.id)
