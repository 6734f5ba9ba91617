from pydantic import BaseModel, ConfigDict, field_validator

TEXT_FIELDS = ("title", "description", "due_date", "status")


class TaskIn(BaseModel):
    """Task JSON body for create and update. Any id in the body is ignored."""

    title: str = ""
    description: str = ""
    due_date: str = ""
    status: str = ""

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return "" if v is None else v

    # JSON escapes can smuggle in lone surrogates, which the store cannot encode
    @field_validator(*TEXT_FIELDS)
    @classmethod
    def encodable(cls, v: str) -> str:
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("must be valid UTF-8 text")
        return v


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str = ""
    description: str = ""
    due_date: str = ""
    status: str = ""

    # nullable columns come back as None
    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return "" if v is None else v
