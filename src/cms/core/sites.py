#-------------------------------------------------------------------------bh-
# Common Imports:
from ..base import *
#-------------------------------------------------------------------------eh-


#-------------------------------------------------------------------------bm-
#----------------------------------------------------------------------------
class Site(Base):
    """A site of a multi-site installation (blogs table)."""
    __tablename__ = 'blogs'

    blog_id = Column(BigInteger().with_variant(Integer, 'sqlite'), primary_key=True, autoincrement=True)
    domain = Column(String(200), nullable=False, default='')
    path = Column(String(100), nullable=False, default='/')

    members = relationship('SiteUser', back_populates='site', cascade='all, delete-orphan')

    @classmethod
    def get_by_id(cls, session, blog_id: int) -> Optional['Site']:
        return session.get(cls, blog_id)

    @classmethod
    def get_all(cls, session) -> List['Site']:
        """All sites, in id order."""
        return session.query(cls).order_by(cls.blog_id).all()

    def __repr__(self):
        return f"<Site(id={self.blog_id}, domain='{self.domain}{self.path}')>"


#----------------------------------------------------------------------------
class SiteUser(Base):
    """Membership of a user in a site."""
    __tablename__ = 'blog_users'

    blog_id = Column(BigInteger().with_variant(Integer, 'sqlite'), ForeignKey('blogs.blog_id'), primary_key=True)
    user_id = Column(BigInteger().with_variant(Integer, 'sqlite'), ForeignKey('users.ID'), primary_key=True)

    site = relationship('Site', back_populates='members')
    user = relationship('User', back_populates='site_memberships')

    def __repr__(self):
        return f"<SiteUser(site={self.blog_id}, user={self.user_id})>"
#-------------------------------------------------------------------------em-
