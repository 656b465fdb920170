import logging
import uuid
from datetime import datetime, timezone
from typing import List

from models.post import AuthorSnapshot, Comment, Like, Post
from services.firestore import FirestoreDB


class PostServiceError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PostServiceError):
    status_code = 400

    def __init__(self, message: str, param: str = "text"):
        super().__init__(message)
        self.param = param


class NotFound(PostServiceError):
    status_code = 404


class Unauthorized(PostServiceError):
    status_code = 401


class Conflict(PostServiceError):
    status_code = 400


def require_text(text: str) -> None:
    if not text:
        raise ValidationError("Text is required")


class PostService:
    def __init__(self, db: FirestoreDB):
        self.db = db

    async def _get_author(self, user_id: str) -> AuthorSnapshot:
        author = await self.db.get_author(user_id)
        if author is None:
            raise NotFound("User not found")
        return author

    async def _get_post(self, post_id: str) -> Post:
        post = await self.db.get_post(post_id)
        if post is None:
            raise NotFound("Post not found")
        return post

    async def create_post(self, user_id: str, text: str) -> Post:
        """Create a post owned by the caller with an author snapshot and no likes or comments"""
        require_text(text)
        author = await self._get_author(user_id)

        post = Post(
            text=text,
            name=author.name,
            avatar=author.avatar,
            user=user_id,
            likes=[],
            comments=[],
            date=datetime.now(timezone.utc),
        )
        post = await self.db.save_post(post)
        logging.info("Post %s created by %s", post.id, user_id)
        return post

    async def list_posts(self) -> List[Post]:
        return await self.db.get_all_posts()

    async def get_post(self, post_id: str) -> Post:
        return await self._get_post(post_id)

    async def delete_post(self, user_id: str, post_id: str) -> None:
        """Permanently remove a post; only its owner may do so"""
        post = await self._get_post(post_id)
        if post.user != user_id:
            raise Unauthorized("User not authorised")

        await self.db.delete_post(post_id)
        logging.info("Post %s removed by %s", post_id, user_id)

    async def like_post(self, user_id: str, post_id: str) -> List[Like]:
        post = await self._get_post(post_id)

        if any(like.user == user_id for like in post.likes):
            raise Conflict("Post already liked")

        # newest first
        post.likes.insert(0, Like(user=user_id))

        await self.db.save_post(post)
        return post.likes

    async def unlike_post(self, user_id: str, post_id: str) -> List[Like]:
        post = await self._get_post(post_id)

        remove_index = next(
            (i for i, like in enumerate(post.likes) if like.user == user_id),
            None,
        )
        if remove_index is None:
            raise Conflict("Post has not yet been liked")

        del post.likes[remove_index]

        await self.db.save_post(post)
        return post.likes

    async def add_comment(self, user_id: str, post_id: str, text: str) -> List[Comment]:
        require_text(text)
        post = await self._get_post(post_id)
        author = await self._get_author(user_id)

        comment = Comment(
            id=uuid.uuid4().hex,
            text=text,
            name=author.name,
            avatar=author.avatar,
            user=user_id,
            date=datetime.now(timezone.utc),
        )
        post.comments.insert(0, comment)

        await self.db.save_post(post)
        return post.comments

    async def delete_comment(self, user_id: str, post_id: str, comment_id: str) -> List[Comment]:
        """Remove a comment from a post; only the comment's author may do so"""
        post = await self._get_post(post_id)

        comment = next((c for c in post.comments if c.id == comment_id), None)
        if comment is None:
            raise NotFound("Comment does not exist")

        if comment.user != user_id:
            raise Unauthorized("User not authorised")

        post.comments = [c for c in post.comments if c.id != comment_id]

        await self.db.save_post(post)
        return post.comments
