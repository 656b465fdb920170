from typing import List

from fastapi import APIRouter

from dependencies import CurrentUser, Posts
from models.post import Comment, CommentCreate, Like, Post, PostCreate

router = APIRouter()


@router.post("", response_model=Post)
async def create_post(current_user: CurrentUser, posts: Posts, data: PostCreate):
    """Create a new post owned by the current user"""
    return await posts.create_post(current_user.user_id, data.text)


@router.get("", response_model=List[Post])
async def get_posts(current_user: CurrentUser, posts: Posts):
    """Get all posts, newest first"""
    return await posts.list_posts()


@router.get("/{post_id}", response_model=Post)
async def get_post(post_id: str, current_user: CurrentUser, posts: Posts):
    return await posts.get_post(post_id)


@router.delete("/{post_id}")
async def delete_post(post_id: str, current_user: CurrentUser, posts: Posts):
    """Delete a post, only allowed for its owner"""
    await posts.delete_post(current_user.user_id, post_id)
    return {"msg": "Post removed"}


@router.put("/like/{post_id}", response_model=List[Like])
async def like_post(post_id: str, current_user: CurrentUser, posts: Posts):
    return await posts.like_post(current_user.user_id, post_id)


@router.put("/unlike/{post_id}", response_model=List[Like])
async def unlike_post(post_id: str, current_user: CurrentUser, posts: Posts):
    return await posts.unlike_post(current_user.user_id, post_id)


@router.post("/comment/{post_id}", response_model=List[Comment])
async def add_comment(post_id: str, current_user: CurrentUser, posts: Posts, comment: CommentCreate):
    """Add a comment to a post, newest first"""
    return await posts.add_comment(current_user.user_id, post_id, comment.text)


@router.delete("/comment/{post_id}/{comment_id}", response_model=List[Comment])
async def delete_comment(post_id: str, comment_id: str, current_user: CurrentUser, posts: Posts):
    """Delete a comment, only allowed for its author"""
    return await posts.delete_comment(current_user.user_id, post_id, comment_id)
