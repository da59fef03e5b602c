from pydantic import BaseModel, EmailStr, Field, field_validator

BCRYPT_MAX_BYTES = 72

class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)

    @field_validator("password")
    @classmethod
    def fits_bcrypt(cls, v: str) -> str:
        # bcrypt rejects input longer than 72 bytes, not characters
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
        return v

class RegisterRequest(LoginRequest):
    name: str = Field(min_length=1)
