from sqlalchemy import Column, Integer, String, DateTime
from shorty.database.connection import Base


class ShortLink(Base):
    """
    One shortened URL.
    
    The auto-increment id is what gets encoded into the short code, so it
    must stay stable once assigned. The unique constraint on url is the
    final arbiter when two requests register the same URL at once.
    """
    __tablename__ = "urls"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    url = Column(String(1000), unique=True, nullable=False)
    created = Column(DateTime(timezone=True), nullable=False)
    accessed = Column(DateTime(timezone=True), nullable=True)
    hits = Column(Integer, nullable=False, default=0, server_default="0")

    def __repr__(self) -> str:
        return f"<ShortLink(id={self.id}, url='{self.url}', hits={self.hits})>"
