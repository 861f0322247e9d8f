from .subject import Subject
from .article import Article

__all__ = [
    "Subject",
    "Article",
]
