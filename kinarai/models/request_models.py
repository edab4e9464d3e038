from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kinarai.models.response_models import ChatMessage


class RecommendRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    location: Optional[str] = None
    food_type: Optional[str] = Field(None, alias="foodType")

    # blank strings count as "not provided"
    @field_validator("location", "food_type", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def has_query(self) -> bool:
        return bool(self.location or self.food_type)


class ChatRequest(BaseModel):
    message: str
    history: List[ChatMessage] = []
