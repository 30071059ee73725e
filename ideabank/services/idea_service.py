import logging
from typing import List

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from ideabank.errors import NotFoundError
from ideabank.models.idea_model import Idea
from ideabank.schemas.idea_schemas import IdeaIn
from ideabank.utils.date_utils import normalize_datetime

logger = logging.getLogger(__name__)

IDEA_NOT_FOUND = "Ideia não encontrada"


def _row_values(fields: IdeaIn) -> dict:
    values = fields.model_dump()
    values["data"] = normalize_datetime(fields.data)
    return values


async def create(db: AsyncSession, fields: IdeaIn) -> int:
    idea = Idea(**_row_values(fields))
    db.add(idea)
    await db.commit()
    await db.refresh(idea)
    logger.info("Idea %s created (data=%s)", idea.id, idea.data)
    return idea.id


async def list_all(db: AsyncSession) -> List[Idea]:
    result = await db.execute(select(Idea))
    return result.scalars().all()


async def get_by_id(db: AsyncSession, idea_id: int) -> Idea:
    idea = await db.get(Idea, idea_id)
    if not idea:
        raise NotFoundError(IDEA_NOT_FOUND)
    return idea


async def update_idea(db: AsyncSession, idea_id: int, fields: IdeaIn) -> None:
    # Full replace: every column is written, absent optionals become null
    result = await db.execute(
        update(Idea).where(Idea.id == idea_id).values(**_row_values(fields))
    )
    if result.rowcount == 0:
        await db.rollback()
        raise NotFoundError(IDEA_NOT_FOUND)

    await db.commit()
    logger.info("Idea %s updated", idea_id)


async def delete_by_id(db: AsyncSession, idea_id: int) -> None:
    result = await db.execute(delete(Idea).where(Idea.id == idea_id))
    if result.rowcount == 0:
        await db.rollback()
        raise NotFoundError(IDEA_NOT_FOUND)

    await db.commit()
    logger.info("Idea %s deleted", idea_id)
