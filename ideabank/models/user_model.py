from sqlalchemy import Column, Integer, String, Date, DateTime

from ideabank.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    nascimento = Column(Date, nullable=True)
    telefone = Column(String, nullable=True)
    instagram_username = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=True)
