# server/api/blog.py

from datetime import datetime
from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session
from api.auth import get_current_user
from core.responses import failed, success
from core.validation import BlogRequest, validate
from database import get_db
from models.blog import Blog


# -------------------------------
# Router & Schemas
# -------------------------------

# Every blog endpoint requires a valid bearer token
router = APIRouter(
    prefix="/api/blog",
    tags=["Blogs"],
    dependencies=[Depends(get_current_user)],
)

NOT_FOUND = "Blog post is not found!"
NONE_FOUND = "No blog posts found!"


class BlogPost(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    created_at: datetime
    updated_at: datetime


def _validated(data: dict | None) -> dict:
    return validate(BlogRequest, data or {}).model_dump()


def _latest(query):
    return query.order_by(Blog.created_at.desc(), Blog.id.desc()).all()


# -------------------------------
# Endpoints
# -------------------------------

@router.get("", summary="Get all blog posts")
def index(db: Session = Depends(get_db)):
    """
    Lists all blog posts, newest first.
    """
    posts = _latest(db.query(Blog))
    if not posts:
        return failed(NONE_FOUND)
    return success("Blog posts are retrieved successfully.", [BlogPost.model_validate(p) for p in posts])


@router.post("", summary="Create a new blog post")
def store(data: dict | None = Body(default=None), db: Session = Depends(get_db)):
    post = Blog(**_validated(data))
    db.add(post)
    db.commit()
    db.refresh(post)
    return success("Blog post is added successfully.", BlogPost.model_validate(post))


@router.get("/search/{title}", summary="Search for blog posts by title")
def search(title: str, db: Session = Depends(get_db)):
    """
    Returns posts whose title contains `title`.
    The query is matched literally; `%` and `_` are not wildcards.
    """
    posts = _latest(db.query(Blog).filter(Blog.title.contains(title, autoescape=True)))
    if not posts:
        return failed(NONE_FOUND)
    return success("Blog posts are retrieved successfully.", [BlogPost.model_validate(p) for p in posts])


@router.get("/{id}", summary="Get a specific blog post")
def show(id: int, db: Session = Depends(get_db)):
    post = db.get(Blog, id)
    if post is None:
        return failed(NOT_FOUND)
    return success("Blog post is retrieved successfully.", BlogPost.model_validate(post))


@router.post("/{id}", summary="Update a specific blog post")
def update(id: int, data: dict | None = Body(default=None), db: Session = Depends(get_db)):
    changes = _validated(data)

    post = db.get(Blog, id)
    if post is None:
        return failed(NOT_FOUND)

    for field, value in changes.items():
        setattr(post, field, value)
    db.commit()
    db.refresh(post)
    return success("Blog post is updated successfully.", BlogPost.model_validate(post))


@router.delete("/{id}", summary="Delete a specific blog post")
def destroy(id: int, db: Session = Depends(get_db)):
    post = db.get(Blog, id)
    if post is None:
        return failed(NOT_FOUND)

    db.delete(post)
    db.commit()
    return success("Blog post is deleted successfully.")
