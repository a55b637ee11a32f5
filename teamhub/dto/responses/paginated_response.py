import math

from pydantic import BaseModel


class PaginationDTO(BaseModel):
    page: int
    limit: int
    total: int
    totalPages: int

    @classmethod
    def from_counts(cls, page: int, limit: int, total: int) -> "PaginationDTO":
        return cls(page=page, limit=limit, total=total, totalPages=math.ceil(total / limit) if limit else 0)


class PaginatedResponse(BaseModel):
    success: bool = True
    pagination: PaginationDTO
