from pydantic import BaseModel, field_serializer
from typing import Optional
from datetime import datetime
from enum import Enum

from ideabank.utils.date_utils import format_datetime

class Categoria(str, Enum):
    LEGENDADO = "Legendado"
    MATERIA = "Matéria"
    MEME = "Meme"

class IdeaStatus(str, Enum):
    PENDENTE = "Pendente"
    CONCLUIDA = "Concluída"

class IdeaIn(BaseModel):
    """Body of POST /ideias and PUT /ideias/{id}.

    PUT is a full replace: fields left out are written back as null/false.
    """
    titulo: str
    videoUrl: Optional[str] = None
    musicaUrl: Optional[str] = None
    categoria: Optional[Categoria] = None
    descricao: Optional[str] = None
    status: Optional[IdeaStatus] = None
    favorito: bool = False
    publicidade: bool = False
    data: Optional[datetime] = None

class IdeaOut(IdeaIn):
    id: int

    model_config = {
        "from_attributes": True
    }

    @field_serializer("data")
    def serialize_data(self, value: Optional[datetime]):
        return format_datetime(value)

class IdeaCreated(BaseModel):
    message: str
    id: int

class MessageResponse(BaseModel):
    message: str
