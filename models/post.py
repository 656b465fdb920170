from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class AuthorSnapshot(BaseModel):
    """Author identity copied onto a post or comment when it is created"""
    name: str
    avatar: Optional[str] = None


class Like(BaseModel):
    user: str


class Comment(BaseModel):
    id: str
    text: str
    name: str
    avatar: Optional[str] = None
    user: str
    date: datetime


class Post(BaseModel):
    id: Optional[str] = None
    text: str
    name: str
    avatar: Optional[str] = None
    user: str
    likes: List[Like] = []
    comments: List[Comment] = []
    date: datetime

    def to_document(self) -> dict:
        """Firestore document body, without the document id"""
        return self.model_dump(exclude={"id"})


class PostCreate(BaseModel):
    text: str


class CommentCreate(BaseModel):
    text: str
