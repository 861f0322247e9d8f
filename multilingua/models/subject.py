from sqlalchemy import Column, Integer, String, UniqueConstraint
from multilingua.database import Base


class Subject(Base):
    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    slug = Column(String, nullable=False, index=True)
    icon = Column(String, nullable=False, default="")
    # Incremented on article creation only; never decremented
    article_count = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("slug", name="uq_subject_slug"),
        # ids are never reused, even after the newest row is deleted
        {"sqlite_autoincrement": True},
    )
