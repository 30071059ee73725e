from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, Enum as SqlEnum, false
from ideabank.database import Base
from ideabank.schemas.idea_schemas import Categoria, IdeaStatus


def _enum_values(enum_cls):
    # persist the display values ("Matéria"), not the member names
    return [member.value for member in enum_cls]


class Idea(Base):
    __tablename__ = "ideias"

    id = Column(Integer, primary_key=True, index=True)
    titulo = Column(String, nullable=False)
    videoUrl = Column(String, nullable=True)
    musicaUrl = Column(String, nullable=True)
    categoria = Column(
        SqlEnum(
            Categoria,
            name="categoria",
            native_enum=False,
            length=20,
            values_callable=_enum_values,
        ),
        nullable=True,
    )
    descricao = Column(Text, nullable=True)
    status = Column(
        SqlEnum(
            IdeaStatus,
            name="idea_status",
            native_enum=False,
            length=20,
            values_callable=_enum_values,
        ),
        nullable=True,
    )
    favorito = Column(Boolean, default=False, nullable=False, server_default=false())
    publicidade = Column(Boolean, default=False, nullable=False, server_default=false())

    # naive server-local time, see ideabank.utils.date_utils.normalize_datetime
    data = Column(DateTime, nullable=True)
