from typing import Any, Dict, List, Optional

import httpx

from ideabank.config import API_BASE_URL
from ideabank.schemas.idea_schemas import IdeaIn


class ApiError(Exception):
    """A 4xx/5xx answer from the backend, with the message from its body."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class ApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        http: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        # any httpx.Client works here, including fastapi.testclient.TestClient
        self.http = http if http is not None else httpx.Client(
            base_url=base_url or API_BASE_URL, timeout=timeout
        )

    def set_token(self, token: str) -> None:
        self.http.headers["Authorization"] = f"Bearer {token}"

    def clear_token(self) -> None:
        self.http.headers.pop("Authorization", None)

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        response = self.http.request(method, path, **kwargs)
        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = None
            # gateways may answer with a bare string or list instead of {"error": ...}
            message = body.get("error") if isinstance(body, dict) else None
            message = message or response.text
            raise ApiError(response.status_code, message or "Erro na requisição")
        return response

    # auth

    def register(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/auth/register", json=payload).json()

    def login(self, email: str, password: str) -> Dict[str, Any]:
        return self._request(
            "POST", "/auth/login", json={"email": email, "password": password}
        ).json()

    def me(self) -> Dict[str, Any]:
        return self._request("GET", "/auth/me").json()

    # ideas

    def list_ideas(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/ideias").json()

    def get_idea(self, idea_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/ideias/{idea_id}").json()

    def create_idea(self, idea: IdeaIn) -> int:
        body = self._request("POST", "/ideias", json=idea.model_dump(mode="json")).json()
        return body["id"]

    def update_idea(self, idea_id: int, idea: IdeaIn) -> None:
        self._request("PUT", f"/ideias/{idea_id}", json=idea.model_dump(mode="json"))

    def delete_idea(self, idea_id: int) -> None:
        self._request("DELETE", f"/ideias/{idea_id}")

    def close(self) -> None:
        self.http.close()
