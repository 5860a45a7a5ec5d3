"""Article domain model."""

from presstrack.model.article import (
    STATUS_CONSTRAINTS,
    Article,
    ArticleStatus,
    Author,
    Link,
    Outlet,
    PublicationDate,
    Source,
    Tag,
    Title,
)

__all__ = [
    "STATUS_CONSTRAINTS",
    "Article",
    "ArticleStatus",
    "Author",
    "Link",
    "Outlet",
    "PublicationDate",
    "Source",
    "Tag",
    "Title",
]
