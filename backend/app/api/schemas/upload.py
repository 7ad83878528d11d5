from pydantic import BaseModel


class UploadResponse(BaseModel):
    success: bool = True
    url: str
    filename: str | None = None
    size: int


class UploadFailureResponse(BaseModel):
    success: bool = False
    error: str


class HealthResponse(BaseModel):
    status: str
    service: str
    timestamp: str
