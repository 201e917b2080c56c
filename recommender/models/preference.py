"""Genre preference model."""

from sqlalchemy import BigInteger, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from recommender.models.base import Base, CreatedAtMixin


class GenrePreference(Base, CreatedAtMixin):
    """A user's declared interest in a catalog genre.

    Only the genre id is stored; genres belong to the content catalog and
    are never copied here. Rows are never updated, only created or deleted.
    """

    __tablename__ = "genre_preferences"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    genre_id: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "genre_id", name="uq_genre_preference_user_genre"),
        Index("ix_genre_preferences_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<GenrePreference(user_id={self.user_id}, genre_id={self.genre_id})>"
