import logging
from typing import List, Optional

import firebase_admin
from firebase_admin import firestore_async
from google.api_core.exceptions import InvalidArgument
from google.cloud import firestore

from models.post import AuthorSnapshot, Post


class FirestoreDB:
    def __init__(self, app: firebase_admin.App):
        self.db = firestore_async.client(app)

    def collection(self, name: str):
        return self.db.collection(name)

    async def get_author(self, user_id: str) -> Optional[AuthorSnapshot]:
        """Get the name and avatar of a user, or None if the user doc is missing"""
        snapshot = await self.collection("users").document(user_id).get()
        if not snapshot.exists:
            return None

        user_data = snapshot.to_dict()
        return AuthorSnapshot(
            name=user_data.get("name", "Unknown"),
            avatar=user_data.get("avatar"),
        )

    async def get_all_posts(self) -> List[Post]:
        """Get all posts sorted by date descending"""
        posts_ref = self.collection("posts").order_by("date", direction=firestore.Query.DESCENDING).stream()
        posts = []
        async for doc in posts_ref:
            posts.append(Post(id=doc.id, **doc.to_dict()))
        return posts

    async def get_post(self, post_id: str) -> Optional[Post]:
        """
        Get a post by ID

        A malformed document id is reported the same way as a missing post.
        """
        try:
            snapshot = await self.collection("posts").document(post_id).get()
        except (ValueError, InvalidArgument) as e:
            logging.warning("Malformed post id %r: %s", post_id, e)
            return None

        if not snapshot.exists:
            return None
        return Post(id=snapshot.id, **snapshot.to_dict())

    async def save_post(self, post: Post) -> Post:
        """Write the whole post document, creating it (and its id) on first save"""
        if post.id is None:
            post_ref = self.collection("posts").document()
            post.id = post_ref.id
        else:
            post_ref = self.collection("posts").document(post.id)

        await post_ref.set(post.to_document())
        return post

    async def delete_post(self, post_id: str) -> None:
        await self.collection("posts").document(post_id).delete()
