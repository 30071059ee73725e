from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ideabank.database import get_async_session
from ideabank.schemas.idea_schemas import IdeaIn, IdeaOut, IdeaCreated, MessageResponse
from ideabank.services import idea_service

# Ideas are not scoped per user and need no token
router = APIRouter(prefix="/ideias", tags=["ideias"])


@router.post("", response_model=IdeaCreated, status_code=status.HTTP_201_CREATED)
async def create_idea(idea: IdeaIn, db: AsyncSession = Depends(get_async_session)):
    idea_id = await idea_service.create(db, idea)
    return IdeaCreated(message="Ideia criada com sucesso!", id=idea_id)


@router.get("", response_model=List[IdeaOut])
async def list_ideas(db: AsyncSession = Depends(get_async_session)):
    return await idea_service.list_all(db)


@router.get("/{idea_id}", response_model=IdeaOut)
async def get_idea(idea_id: int, db: AsyncSession = Depends(get_async_session)):
    return await idea_service.get_by_id(db, idea_id)


@router.put("/{idea_id}", response_model=MessageResponse)
async def update_idea(idea_id: int, idea: IdeaIn, db: AsyncSession = Depends(get_async_session)):
    await idea_service.update_idea(db, idea_id, idea)
    return MessageResponse(message="Ideia atualizada com sucesso!")


@router.delete("/{idea_id}", response_model=MessageResponse)
async def delete_idea(idea_id: int, db: AsyncSession = Depends(get_async_session)):
    await idea_service.delete_by_id(db, idea_id)
    return MessageResponse(message="Ideia excluída com sucesso!")
