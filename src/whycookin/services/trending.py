"""Daily trending ranking for forum posts."""
from __future__ import annotations

from sqlalchemy import Float, cast
from sqlalchemy.orm import Session

from whycookin.db.time import start_of_today
from whycookin.models import Post, Subcategory
from whycookin.schemas.community import TrendingPost


def trending_posts(db: Session, limit: int) -> list[TrendingPost]:
    """Return today's posts ranked by ``(upvotes + 1) / (downvotes + 1)``.

    "Today" starts at UTC midnight. Ties keep the older post first.
    """
    ratio = (cast(Post.upvotes + 1, Float) / cast(Post.downvotes + 1, Float)).label("ratio")
    rows = (
        db.query(
            Post.id,
            Post.title,
            Post.upvotes,
            Post.downvotes,
            Subcategory.name.label("subcat_name"),
            ratio,
        )
        .outerjoin(Subcategory, Post.subcategory_id == Subcategory.id)
        .filter(Post.created_at >= start_of_today())
        .order_by(ratio.desc(), Post.id)
        .limit(limit)
        .all()
    )
    return [TrendingPost.model_validate(row._asdict()) for row in rows]
