from sqlalchemy import Column, Integer, Text, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from ..model_base import Base
from ..user.models import utc_now


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    issue_id = Column(Integer, ForeignKey('issues.id', ondelete='CASCADE'), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    text = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    issue = relationship('Issue', back_populates='comments')
    author = relationship('User', back_populates='comments')

    def __repr__(self):
        return f"<Comment(id={self.id}, issue_id={self.issue_id}, user_id={self.user_id}, created_at={self.created_at})>"
