"""User data model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Normalized user profile."""

    id: str = Field(..., min_length=1)
    user_name: str = ""
    full_name: str = ""
    created_at: datetime | None = None
    description: str | None = None
    is_verified: bool = False
    favourites_count: int = Field(0, ge=0)
    followers_count: int = Field(0, ge=0)
    followings_count: int = Field(0, ge=0)
    statuses_count: int = Field(0, ge=0)
    location: str | None = None
    pinned_tweet: str | None = None
    profile_banner: str | None = None
    profile_image: str | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @property
    def profile_url(self) -> str:
        """Public profile link."""
        return f"https://x.com/{self.user_name}"
