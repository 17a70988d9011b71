from ....domain.models.post import Post
from ...dto.post_dto import PostResponse


def post_to_response(post: Post) -> PostResponse:
    """Convert a Post domain model to its API representation"""
    return PostResponse(
        id=post.id or "",
        title=post.title,
        content=post.content,
        author=post.author,
        category=post.category,
        slug=post.slug or "",
        created_at=post.created_at,
        updated_at=post.updated_at,
    )
