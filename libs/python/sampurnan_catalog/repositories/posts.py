"""Journal post repository with inlined comments."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Mapping

from pydantic import BaseModel

from sampurnan_schemas import Comment, CommentCreate, Post, PostCreate, PostUpdate

from ..errors import NotFoundError
from .base import Repository

logger = logging.getLogger(__name__)

COMMENTS_TABLE = "comments"
POST_ID_COLUMN = "post_id"


class PostRepository(Repository[Post, PostCreate, PostUpdate]):
    """Posts are read together with their comments but written without them.

    Comments are fetched in a second query for all post ids of the page and
    grouped by ``post_id``, oldest first. The only way to create a comment is
    :meth:`add_comment`; there is no edit or delete.
    """

    table = "blog_posts"
    record_model = Post
    create_model = PostCreate
    update_model = PostUpdate
    search_columns = ("title", "summary", "author")
    read_only_fields = frozenset({"id", "created_at", "comments"})

    async def add_comment(self, post_id: str, comment: CommentCreate | Mapping[str, Any]) -> Comment:
        """Append a comment to an existing post and return the stored record.

        Raises:
            NotFoundError: If the post does not exist.
        """

        payload = comment if isinstance(comment, CommentCreate) else CommentCreate.model_validate(
            comment.model_dump() if isinstance(comment, BaseModel) else comment
        )
        if await self._store.get_by_id(self.table, str(post_id)) is None:
            raise NotFoundError(self.table, str(post_id))

        row = payload.model_dump(mode="json")
        row[POST_ID_COLUMN] = str(post_id)
        created = await self._store.insert(COMMENTS_TABLE, row)
        logger.info("Comment added", extra={"post_id": str(post_id)})
        return Comment.model_validate(created)

    async def list_comments(self, post_id: str) -> list[Comment]:
        rows = await self._store.list_where(COMMENTS_TABLE, POST_ID_COLUMN, [str(post_id)])
        return [Comment.model_validate(row) for row in rows]

    async def _hydrate(self, rows: list[dict[str, Any]]) -> list[Post]:
        if not rows:
            return []
        post_ids = [str(row["id"]) for row in rows]
        comment_rows = await self._store.list_where(COMMENTS_TABLE, POST_ID_COLUMN, post_ids)

        grouped: dict[str, list[Comment]] = defaultdict(list)
        for comment_row in comment_rows:
            comment = Comment.model_validate(comment_row)
            grouped[comment.post_id].append(comment)

        posts = []
        for row in rows:
            data = {key: value for key, value in row.items() if key != "comments"}
            data["comments"] = grouped.get(str(row["id"]), [])
            posts.append(Post.model_validate(data))
        return posts
