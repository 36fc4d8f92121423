# src/tech_news/schemas/vote.py
"""Vote-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UpvoteRequest(BaseModel):
    """Schema for upvoting a post as the logged-in user."""

    post_id: int = Field(..., ge=1, description="ID of the post being upvoted")


class VoteResponse(BaseModel):
    """Schema for vote rows returned by the API."""

    id: int
    user_id: int
    post_id: int

    model_config = ConfigDict(from_attributes=True)
