from pydantic import BaseModel, ConfigDict, field_validator


class UserCreate(BaseModel):
    """A user record: `email` plus any other attributes, kept as received."""

    model_config = ConfigDict(extra="allow")

    email: str

    @field_validator("email")
    @classmethod
    def email_not_empty(cls, v):
        if not v.strip():
            raise ValueError("email cannot be empty")
        return v
