from pydantic import BaseModel, ConfigDict, Field


# Schema for user registration
class UserRegister(BaseModel):
    username: str = Field(..., min_length=1, max_length=150)
    password: str = Field(..., min_length=1)


# Schema for user login
class UserLogin(BaseModel):
    username: str
    password: str


# Schema for user response - never includes the password hash
class UserResponse(BaseModel):
    id: str
    username: str
    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str
