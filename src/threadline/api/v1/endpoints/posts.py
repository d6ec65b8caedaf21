# src/threadline/api/v1/endpoints/posts.py
"""Post, vote and comment endpoints for the Threadline API."""

from fastapi import APIRouter, Query, status

from threadline.api.v1.dependencies import (
    CurrentCallerDep,
    EngagementDep,
    ensure_same_identity,
)
from threadline.core.settings import settings
from threadline.schemas.comment import (
    CommentCreate,
    CommentCreatedResponse,
    CommentResponse,
)
from threadline.schemas.post import (
    PostCreate,
    PostDetailResponse,
    PostPageResponse,
    PostResponse,
)
from threadline.schemas.vote import VoteToggle
from threadline.services.engagement import PostView
from threadline.services.errors import require_fields

router = APIRouter(prefix="/posts", tags=["posts"])


def to_post_response(view: PostView) -> PostResponse:
    """Convert a decorated post into its API schema."""
    post = view.post
    return PostResponse(
        id=str(post.id),
        author_name=post.author_name,
        author_email=post.author_email,
        author_image=post.author_image,
        title=post.title,
        description=post.description,
        tag=post.tag,
        created_at=post.created_at,
        upvoters=view.ledger.upvoters,
        downvoters=view.ledger.downvoters,
        popularity_score=view.metrics.popularity_score,
        comment_count=view.metrics.comment_count,
    )


@router.get("/", response_model=PostPageResponse)
async def list_posts(
    engagement: EngagementDep,
    page: int = Query(1, description="1-based page number"),
    limit: int = Query(
        settings.default_page_size,
        le=settings.max_page_size,
        description="Posts per page",
    ),
    sort_by: str = Query("newest", alias="sortBy", description="'newest' or 'popularity'"),
) -> PostPageResponse:
    """List posts one page at a time with read-time popularity and comment counts.

    Raises:
        ValidationError: If page or limit is not positive or sortBy is unknown.
    """
    result = engagement.get_page(page, limit, sort_by)
    return PostPageResponse(
        items=[to_post_response(view) for view in result.items],
        current_page=result.current_page,
        total_pages=result.total_pages,
        total_count=result.total_count,
    )


@router.get("/{post_id}", response_model=PostDetailResponse)
async def get_post(post_id: str, engagement: EngagementDep) -> PostDetailResponse:
    """Get a specific post with its comments.

    Raises:
        InvalidIdError: If the id is malformed.
        NotFoundError: If the post does not exist.
    """
    view, comments = engagement.get_post(post_id)
    return PostDetailResponse(
        **to_post_response(view).model_dump(),
        comments=[CommentResponse.model_validate(comment) for comment in comments],
    )


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    caller: CurrentCallerDep,
    engagement: EngagementDep,
) -> PostResponse:
    """Create a new post authored by the caller.

    Raises:
        ValidationError: If a required field is missing. Checked before the
            caller identity.
        AuthorizationError: If ``author_email`` is not the caller's email.
    """
    require_fields(
        author_name=post_data.author_name,
        author_email=post_data.author_email,
        title=post_data.title,
        description=post_data.description,
        tag=post_data.tag,
    )
    ensure_same_identity(caller, post_data.author_email, "post")
    post = engagement.posts.create(
        author_name=post_data.author_name,
        author_email=post_data.author_email,
        author_image=post_data.author_image,
        title=post_data.title,
        description=post_data.description,
        tag=post_data.tag,
    )
    return to_post_response(engagement.describe(post))


@router.patch("/{post_id}/vote", response_model=PostResponse)
async def toggle_vote(
    post_id: str,
    vote: VoteToggle,
    caller: CurrentCallerDep,
    engagement: EngagementDep,
) -> PostResponse:
    """Toggle the caller's upvote or downvote on a post.

    Voting the same way twice retracts the vote; voting the other way
    switches it.
    """
    view = engagement.toggle_vote(post_id, caller.email, vote.type)
    return to_post_response(view)


@router.post(
    "/{post_id}/comment",
    response_model=CommentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: str,
    payload: CommentCreate,
    caller: CurrentCallerDep,
    engagement: EngagementDep,
) -> CommentCreatedResponse:
    """Comment on a post as the caller."""
    comment, count = engagement.comments.append(
        post_id,
        commenter_email=caller.email,
        commenter_name=caller.name,
        commenter_image=caller.picture,
        body=payload.comment,
    )
    return CommentCreatedResponse(
        comment=CommentResponse.model_validate(comment),
        comment_count=count,
    )


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
async def list_comments(post_id: str, engagement: EngagementDep) -> list[CommentResponse]:
    """List a post's comments, newest first."""
    post = engagement.posts.get_by_id(post_id)
    return [
        CommentResponse.model_validate(comment)
        for comment in engagement.comments.list_for_post(post.id)
    ]
