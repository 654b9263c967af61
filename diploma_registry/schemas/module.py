from pydantic import BaseModel, Field, field_validator


class ModuleCreate(BaseModel):
    program_id: int
    code: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1, max_length=255)
    credits: int = Field(gt=0)  # CATS credits


class ModuleUpdate(BaseModel):
    code: str | None = Field(default=None, min_length=1, max_length=50)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    credits: int | None = Field(default=None, gt=0)

    @field_validator("code", "name", "credits")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not set to null")
        return v


class ModuleRead(BaseModel):
    id: int
    program_id: int
    code: str
    name: str
    credits: int

    class Config:
        from_attributes = True
