"""
Person Database Model
"""

from sqlalchemy import Column, Integer, String, Date, Table, ForeignKey
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin

# Association table for the movie cast; the composite key rules out duplicate membership
movie_person = Table(
    "movie_person", Base.metadata,
    Column("movie_id", Integer, ForeignKey("movies.id", ondelete="CASCADE"), primary_key=True),
    Column("person_id", Integer, ForeignKey("people.id", ondelete="CASCADE"), primary_key=True),
)


class Person(Base, TimestampMixin):
    __tablename__ = "people"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    date_of_birth = Column(Date)

    # Loaded explicitly where needed; Movie.actors is the eager side
    movies = relationship("Movie", secondary=movie_person, back_populates="actors")

    def __repr__(self):
        return f"<Person(id={self.id}, name='{self.name}')>"
