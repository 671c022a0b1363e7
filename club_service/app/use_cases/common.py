from pydantic import BaseModel


class Pagination(BaseModel):
    """Page/limit pagination block shared by list responses"""

    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, pages=-(-total // limit))
