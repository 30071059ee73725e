"""In-memory ideas cache used by every client view.

Write-through, refetch-all: each mutation goes to the API and, once it
succeeds, the whole list is fetched again. Nothing is patched locally, so
after a failure the cache still shows the last list the server returned.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

import httpx

from ideabank.client.api import ApiClient, ApiError
from ideabank.schemas.idea_schemas import IdeaIn, IdeaOut

logger = logging.getLogger(__name__)


@dataclass
class MutationResult:
    ok: bool
    error: Optional[str] = None
    # False when the change was saved but the list could not be reloaded
    refreshed: bool = True


def _describe(exc: Exception) -> str:
    if isinstance(exc, ApiError):
        return exc.message
    return "Falha de conexão com o servidor"


class IdeasStore:
    def __init__(self, api: ApiClient):
        self.api = api
        self.ideas: List[IdeaOut] = []
        self.last_error: Optional[str] = None

    def refresh(self) -> bool:
        try:
            rows = self.api.list_ideas()
        except (ApiError, httpx.HTTPError) as exc:
            logger.error("Erro ao buscar as ideias: %s", exc)
            self.last_error = _describe(exc)
            return False

        self.ideas = [IdeaOut.model_validate(row) for row in rows]
        self.last_error = None
        return True

    def get(self, idea_id: int) -> Optional[IdeaOut]:
        for idea in self.ideas:
            if idea.id == idea_id:
                return idea
        return None

    def _mutate(self, label: str, call: Callable[[], object]) -> MutationResult:
        try:
            call()
        except (ApiError, httpx.HTTPError) as exc:
            logger.error("Erro ao %s a ideia: %s", label, exc)
            self.last_error = _describe(exc)
            return MutationResult(ok=False, error=self.last_error)

        if not self.refresh():
            return MutationResult(ok=True, error=self.last_error, refreshed=False)
        return MutationResult(ok=True)

    def add(self, idea: IdeaIn) -> MutationResult:
        return self._mutate("criar", lambda: self.api.create_idea(idea))

    def update(self, idea_id: int, idea: IdeaIn) -> MutationResult:
        return self._mutate("atualizar", lambda: self.api.update_idea(idea_id, idea))

    def remove(self, idea_id: int) -> MutationResult:
        return self._mutate("excluir", lambda: self.api.delete_idea(idea_id))
