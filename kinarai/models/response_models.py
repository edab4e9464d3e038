import math
import uuid
from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

PRICE_RANGES = ("$", "$$", "$$$", "$$$$")


class Restaurant(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str
    cuisine: Optional[str] = None
    address: Optional[str] = None
    rating: Optional[float] = None
    price_range: Optional[str] = Field(None, alias="priceRange")
    description: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("rating", mode="before")
    @classmethod
    def _clamp_rating(cls, v):
        # models sometimes answer "4.5" or "4.5/5"
        if v is None or v == "":
            return None
        try:
            value = float(str(v).split("/")[0])
        except ValueError:
            return None
        if not math.isfinite(value):
            return None
        return round(min(max(value, 1.0), 5.0), 1)

    @field_validator("price_range", mode="before")
    @classmethod
    def _known_price_range(cls, v):
        if not isinstance(v, str):
            return None
        v = v.strip()
        return v if v in PRICE_RANGES else None

    @field_validator("image_url", mode="before")
    @classmethod
    def _blank_image(cls, v):
        return v or None


class Food(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str
    cuisine: Optional[str] = None
    description: Optional[str] = None
    ingredients: Optional[List[str]] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("ingredients", mode="before")
    @classmethod
    def _ingredients_list(cls, v):
        if v is None:
            return None
        if isinstance(v, str):
            return [v]
        if isinstance(v, list):
            return [str(i) for i in v if isinstance(i, (str, int, float))]
        return None

    @field_validator("image_url", mode="before")
    @classmethod
    def _blank_image(cls, v):
        return v or None


class RecommendResponse(BaseModel):
    restaurants: Optional[List[Restaurant]] = None
    foods: Optional[List[Food]] = None
    error: Optional[str] = None

    def to_json(self) -> dict:
        # absent branches are omitted, not sent as null
        return self.model_dump(by_alias=True, exclude_none=True)


class ChatMessage(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ChatResponse(BaseModel):
    messages: List[ChatMessage]
    recent: List[ChatMessage]
    restaurants: Optional[List[Restaurant]] = None
    foods: Optional[List[Food]] = None
    error: Optional[str] = None

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
