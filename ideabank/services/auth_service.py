import logging
from datetime import date, datetime, timezone
from typing import Optional, Tuple

from passlib.hash import bcrypt
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from ideabank.errors import AuthError, ConflictError, NotFoundError, ValidationError
from ideabank.models.user_model import User
from ideabank.utils.token_utils import create_access_token

logger = logging.getLogger(__name__)

# Same message for unknown email and wrong password
INVALID_CREDENTIALS = "Credenciais inválidas"


def _normalize_email(email: str) -> str:
    return email.strip().lower()


async def register(
    db: AsyncSession,
    *,
    nome: Optional[str],
    email: Optional[str],
    password: Optional[str],
    nascimento: Optional[date] = None,
    telefone: Optional[str] = None,
    instagram_username: Optional[str] = None,
) -> int:
    if not (nome or "").strip() or not (email or "").strip() or not password:
        raise ValidationError("nome, email e password são obrigatórios")

    email_norm = _normalize_email(email)

    result = await db.execute(select(User.id).where(func.lower(User.email) == email_norm))
    if result.first() is not None:
        raise ConflictError("Email já cadastrado")

    new_user = User(
        nome=nome.strip(),
        email=email_norm,
        password_hash=bcrypt.hash(password),
        nascimento=nascimento,
        telefone=telefone or None,
        instagram_username=instagram_username or None,
        created_at=datetime.now(timezone.utc),
    )

    try:
        db.add(new_user)
        await db.commit()
    except IntegrityError:
        # lost a race with a concurrent register for the same email
        await db.rollback()
        raise ConflictError("Email já cadastrado")

    await db.refresh(new_user)
    logger.info("User %s registered", new_user.id)
    return new_user.id


async def login(db: AsyncSession, email: Optional[str], password: Optional[str]) -> Tuple[str, User]:
    if not (email or "").strip() or not password:
        raise ValidationError("email e password são obrigatórios")

    result = await db.execute(select(User).where(User.email == _normalize_email(email)))
    db_user = result.scalar_one_or_none()

    if not db_user or not bcrypt.verify(password, db_user.password_hash):
        logger.info("Rejected login attempt")
        raise AuthError(INVALID_CREDENTIALS)

    token = create_access_token(db_user.id, db_user.email)
    return token, db_user


async def me(db: AsyncSession, user_id: int) -> User:
    user = await db.get(User, user_id)
    if not user:
        raise NotFoundError("Usuário não encontrado")
    return user
