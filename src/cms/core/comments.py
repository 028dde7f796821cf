#-------------------------------------------------------------------------bh-
# Common Imports:
from ..base import *
#-------------------------------------------------------------------------eh-


#-------------------------------------------------------------------------bm-
#----------------------------------------------------------------------------
class Comment(Base):
    """A comment left on a site (comments table)."""
    __tablename__ = 'comments'

    __table_args__ = (
        Index('ix_comments_blog_approved', 'blog_id', 'comment_approved'),
    )

    # comment_approved values
    APPROVED = '1'
    HOLD = '0'
    TRASH = 'trash'
    SPAM = 'spam'

    # Statuses returned by a plain listing (no status filter)
    REGULAR_STATUSES = (APPROVED, HOLD)

    AUTHOR_FIELDS = (
        'comment_author', 'comment_author_email', 'comment_author_url',
        'comment_author_IP', 'comment_agent',
    )

    comment_ID = Column(BigInteger().with_variant(Integer, 'sqlite'), primary_key=True, autoincrement=True)
    blog_id = Column(BigInteger().with_variant(Integer, 'sqlite'), ForeignKey('blogs.blog_id'), nullable=False, default=1)
    comment_post_ID = Column(BigInteger().with_variant(Integer, 'sqlite'), nullable=False, default=0)
    comment_author = Column(Text, nullable=False, default='')
    comment_author_email = Column(String(100), nullable=False, default='')
    comment_author_url = Column(String(200), nullable=False, default='')
    comment_author_IP = Column(String(100), nullable=False, default='')
    comment_date = Column(DateTime, nullable=False, default=datetime.now)
    comment_content = Column(Text, nullable=False, default='')
    comment_approved = Column(String(20), nullable=False, default=APPROVED)
    comment_agent = Column(String(255), nullable=False, default='')
    user_id = Column(BigInteger().with_variant(Integer, 'sqlite'), nullable=False, default=0)

    site = relationship('Site')

    @property
    def is_trashed(self) -> bool:
        return self.comment_approved == self.TRASH

    @property
    def is_spam(self) -> bool:
        return self.comment_approved == self.SPAM

    def to_dict(self) -> Dict:
        return {column.key: getattr(self, column.key) for column in self.__mapper__.column_attrs}

    def __repr__(self):
        return f"<Comment(id={self.comment_ID}, site={self.blog_id}, status='{self.comment_approved}')>"
#-------------------------------------------------------------------------em-
