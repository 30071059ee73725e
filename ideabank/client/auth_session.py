import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from ideabank.client.api import ApiClient, ApiError
from ideabank.config import CLIENT_STATE_PATH

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"


@dataclass
class AuthResult:
    ok: bool
    error: Optional[str] = None


class SessionStorage:
    """Token and user JSON kept in a small file on the device."""

    def __init__(self, path: str = CLIENT_STATE_PATH):
        self.path = path

    def load(self) -> Dict[str, Any]:
        try:
            with open(self.path, encoding="utf-8") as fh:
                state = json.load(fh)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Falha ao ler sessão armazenada, descartando: %s", exc)
            self.clear()
            return {}
        return state if isinstance(state, dict) else {}

    def save(self, token: str, user: Dict[str, Any]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as fh:
            json.dump({TOKEN_KEY: token, USER_KEY: user}, fh, ensure_ascii=False)

    def clear(self) -> None:
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass


class AuthSession:
    def __init__(self, api: ApiClient, storage: Optional[SessionStorage] = None):
        self.api = api
        self.storage = storage or SessionStorage()
        self.token: Optional[str] = None
        self.user: Optional[Dict[str, Any]] = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def restore(self) -> None:
        """Load the stored session and re-validate it against /auth/me."""
        state = self.storage.load()
        token = state.get(TOKEN_KEY)
        if not token:
            return

        self.token = token
        self.user = state.get(USER_KEY)
        self.api.set_token(token)

        try:
            self.user = self.api.me()
        except ApiError as exc:
            if exc.status_code in (401, 404):
                logger.info("Sessão armazenada rejeitada (%s), limpando", exc.status_code)
                self._forget()
            else:
                logger.warning("Falha ao validar token em /auth/me, mantendo estado local: %s", exc)
            return
        except httpx.HTTPError as exc:
            logger.warning("Falha ao validar token em /auth/me, mantendo estado local: %s", exc)
            return

        self.storage.save(self.token, self.user)

    def sign_in(self, email: str, password: str) -> AuthResult:
        try:
            data = self.api.login(email, password)
        except ApiError as exc:
            return AuthResult(ok=False, error=exc.message)
        except httpx.HTTPError as exc:
            logger.error("signIn error: %s", exc)
            return AuthResult(ok=False, error="Erro ao autenticar")

        self.token = data["token"]
        self.user = data["user"]
        self.api.set_token(self.token)
        self.storage.save(self.token, self.user)
        return AuthResult(ok=True)

    def sign_up(
        self,
        nome: str,
        email: str,
        password: str,
        nascimento: Optional[str] = None,
        telefone: Optional[str] = None,
        instagram_username: Optional[str] = None,
    ) -> AuthResult:
        payload = {
            "nome": nome,
            "email": email,
            "password": password,
            "nascimento": nascimento,
            "telefone": telefone,
            "instagram_username": instagram_username,
        }
        try:
            self.api.register(payload)
        except ApiError as exc:
            return AuthResult(ok=False, error=exc.message)
        except httpx.HTTPError as exc:
            logger.error("signUp error: %s", exc)
            return AuthResult(ok=False, error="Erro ao cadastrar")
        return AuthResult(ok=True)

    def sign_out(self) -> None:
        self._forget()

    def _forget(self) -> None:
        self.storage.clear()
        self.api.clear_token()
        self.token = None
        self.user = None
