from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class BlogEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., alias="_id")
    title: str
    content: str
    media_url: Optional[str] = Field(None, alias="mediaUrl")
    created_at: str = Field(..., alias="createdAt")

    def to_public(self) -> dict:
        """Serialize back to the content service's field names"""
        return self.model_dump(by_alias=True, exclude_none=True)
