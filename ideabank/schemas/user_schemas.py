from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime

class UserCreate(BaseModel):
    # presence is checked by the auth service so a blank field is a 400, not a 422
    nome: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    nascimento: Optional[date] = None
    telefone: Optional[str] = None
    instagram_username: Optional[str] = None

class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class UserOut(BaseModel):
    id: int
    nome: str
    email: str
    nascimento: Optional[date] = None
    telefone: Optional[str] = None
    instagram_username: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }

class RegisterResponse(BaseModel):
    message: str
    id: int

class LoginResponse(BaseModel):
    token: str
    user: UserOut
