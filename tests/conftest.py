import uuid
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from dependencies import get_current_user, get_firestore
from main import app
from models.post import AuthorSnapshot, Post
from models.user import User


class FakeFirestoreDB:
    """In-memory stand-in for FirestoreDB with the same async interface"""

    def __init__(self):
        self.users: Dict[str, AuthorSnapshot] = {}
        self.posts: Dict[str, Post] = {}
        self.saves = 0

    def add_user(self, user_id: str, name: str, avatar: Optional[str] = None):
        self.users[user_id] = AuthorSnapshot(name=name, avatar=avatar)

    async def get_author(self, user_id: str) -> Optional[AuthorSnapshot]:
        return self.users.get(user_id)

    async def get_all_posts(self) -> List[Post]:
        posts = sorted(self.posts.values(), key=lambda p: p.date, reverse=True)
        return [p.model_copy(deep=True) for p in posts]

    async def get_post(self, post_id: str) -> Optional[Post]:
        post = self.posts.get(post_id)
        return post.model_copy(deep=True) if post else None

    async def save_post(self, post: Post) -> Post:
        if post.id is None:
            post.id = uuid.uuid4().hex
        self.posts[post.id] = post.model_copy(deep=True)
        self.saves += 1
        return post

    async def delete_post(self, post_id: str) -> None:
        self.posts.pop(post_id, None)


@pytest.fixture
def fake_db():
    db = FakeFirestoreDB()
    db.add_user("alice", "Alice", "https://avatars.example/alice.png")
    db.add_user("bob", "Bob", "https://avatars.example/bob.png")
    return db


@pytest.fixture
def caller():
    """Mutable holder for the authenticated user id; tests switch users by assignment"""
    return {"user_id": "alice"}


@pytest.fixture
def client(fake_db, caller):
    async def override_firestore():
        return fake_db

    async def override_current_user():
        return User(user_id=caller["user_id"], email=f"{caller['user_id']}@example.com")

    app.dependency_overrides[get_firestore] = override_firestore
    app.dependency_overrides[get_current_user] = override_current_user
    yield TestClient(app)
    app.dependency_overrides.clear()
