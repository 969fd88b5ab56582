from pydantic import BaseModel


class ErrorDetail(BaseModel):
    field: str
    message: str
    code: str | None = None


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: list[ErrorDetail] | None = None
