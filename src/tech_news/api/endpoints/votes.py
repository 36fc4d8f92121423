# src/tech_news/api/endpoints/votes.py
"""Vote endpoints. Votes are cast through ``PUT /api/posts/upvote``."""

from fastapi import APIRouter

from tech_news.schemas.common import AffectedRows
from tech_news.schemas.vote import VoteResponse
from tech_news.services import vote_service

from ..dependencies import SessionDep

router = APIRouter(prefix="/votes", tags=["votes"])


@router.get("", response_model=list[VoteResponse])
async def list_votes(db: SessionDep) -> list[VoteResponse]:
    votes = await vote_service.list_votes(db)
    return [VoteResponse.model_validate(vote) for vote in votes]


@router.get("/{vote_id}", response_model=VoteResponse)
async def get_vote(vote_id: int, db: SessionDep) -> VoteResponse:
    vote = await vote_service.get_vote(db, vote_id)
    return VoteResponse.model_validate(vote)


@router.delete("/{vote_id}", response_model=AffectedRows)
async def delete_vote(vote_id: int, db: SessionDep) -> AffectedRows:
    """Withdraw a vote by id."""
    affected = await vote_service.delete_vote(db, vote_id)
    return AffectedRows(affected_rows=affected)
