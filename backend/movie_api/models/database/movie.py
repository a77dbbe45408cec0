"""
Movie Database Model
"""

from sqlalchemy import Column, Integer, String, Text, Date
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin
from .person import movie_person


class Movie(Base, TimestampMixin):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, index=True)

    # Basic Info
    title = Column(String(500), nullable=False, index=True)
    description = Column(Text)
    language = Column(String(50), nullable=False)
    release_date = Column(Date)
    cover_image = Column(String(1000))

    # Cast: non-owning, deleting a movie only drops its association rows
    actors = relationship(
        "Person",
        secondary=movie_person,
        back_populates="movies",
        lazy="selectin",
        order_by="Person.id",
    )

    def __repr__(self):
        return f"<Movie(id={self.id}, title='{self.title}')>"
