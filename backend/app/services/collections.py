"""
Lazy, read-only query surface over the trivia schema.
collection() describes a query (filter, eager join, order, slice); nothing runs until .all()/.count()/.first().
Relationship names are checked when the query is built, so a typo fails fast with a descriptive ValueError.
"""
from typing import Iterable

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Query, Session, joinedload, selectinload


def _relationship_attr(model, name: str):
    """Resolve a relationship attribute by name, or raise ValueError listing the known ones."""
    mapper = sa_inspect(model)
    rels = mapper.relationships
    if name not in rels:
        known = ", ".join(sorted(rels.keys())) or "none"
        raise ValueError(f"{model.__name__} has no relationship {name!r} (known: {known})")
    return getattr(model, name)


def eager_options(model, relations: Iterable[str], innerjoin: bool = True) -> list:
    """
    Joined eager-load options for many-to-one relationships (same SELECT, no per-row follow-up queries).
    innerjoin=True because every question FK is NOT NULL.
    """
    return [joinedload(_relationship_attr(model, name), innerjoin=innerjoin) for name in relations]


def select_in_options(model, relations: Iterable[str]) -> list:
    """Eager-load options for collections (one extra IN query per relationship, not per row)."""
    return [selectinload(_relationship_attr(model, name)) for name in relations]


def collection(
    db: Session,
    model,
    *,
    eager: Iterable[str] = (),
    filters: Iterable = (),
    order_by: Iterable = (),
) -> Query:
    """Build a lazy query over one entity. No I/O happens here."""
    q = db.query(model)
    filters = list(filters)
    if filters:
        q = q.filter(*filters)
    opts = eager_options(model, eager)
    if opts:
        q = q.options(*opts)
    order_by = list(order_by)
    if order_by:
        q = q.order_by(*order_by)
    return q


def slice_query(q: Query, offset: int, limit: int) -> Query:
    """Offset/limit slice; negative offset is treated as 0."""
    return q.offset(max(0, offset)).limit(limit)
