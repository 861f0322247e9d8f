from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Text, UniqueConstraint
from multilingua.database import Base
from multilingua.schemas.validators import utcnow


class Article(Base):
    """Article row with its per-language content stored as a JSON document.

    ``title``, ``excerpt`` and ``content`` duplicate ``translations['en']`` and
    are rewritten on every save.
    """

    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    slug = Column(String, nullable=False, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False, index=True)

    title = Column(String, nullable=False)
    excerpt = Column(Text, nullable=False)
    content = Column(Text, nullable=False)

    author = Column(String, nullable=False)
    author_image = Column(String, nullable=True)
    image_url = Column(String, nullable=False)
    read_time = Column(Integer, nullable=False)
    publish_date = Column(DateTime, nullable=False, default=utcnow)
    featured = Column(Boolean, nullable=False, default=False)
    view_count = Column(Integer, nullable=False, default=0)

    # {"en": {"title": ..., "excerpt": ..., "content": ..., "notes": [...], "resources": [...]}, ...}
    translations = Column(JSON, nullable=False)
    available_languages = Column(JSON, nullable=False, default=list)

    __table_args__ = (
        UniqueConstraint("slug", name="uq_article_slug"),
        Index("idx_article_publish_date", "publish_date"),
        Index("idx_article_featured", "featured"),
        {"sqlite_autoincrement": True},
    )
