#-------------------------------------------------------------------------bh-
# Common Imports:
from ..base import *
#-------------------------------------------------------------------------eh-


#-------------------------------------------------------------------------bm-
#----------------------------------------------------------------------------
class User(Base, SessionMixin):
    """Represents a user account (users table)."""
    __tablename__ = 'users'

    __table_args__ = (
        Index('ix_users_user_nicename', 'user_nicename'),
        Index('ix_users_user_email', 'user_email'),
    )

    # Columns that live on the users table itself; everything else is metadata
    PROFILE_COLUMNS = (
        'user_login', 'user_pass', 'user_nicename', 'user_email', 'user_url',
        'user_registered', 'user_activation_key', 'user_status', 'display_name',
    )

    def __eq__(self, other):
        """Two users are equal if they have the same user_id."""
        if not isinstance(other, User):
            return False
        return self.user_id is not None and self.user_id == other.user_id

    def __hash__(self):
        """Hash based on user_id for set/dict operations."""
        return hash(self.user_id) if self.user_id is not None else hash(id(self))

    user_id = Column('ID', BigInteger().with_variant(Integer, 'sqlite'), primary_key=True, autoincrement=True)
    user_login = Column(String(60), nullable=False, unique=True, default='')
    user_pass = Column(String(255), nullable=False, default='')
    user_nicename = Column(String(50), nullable=False, default='')
    user_email = Column(String(100), nullable=False, default='')
    user_url = Column(String(100), nullable=False, default='')
    user_registered = Column(DateTime, nullable=False, default=datetime.now)
    user_activation_key = Column(String(255), nullable=False, default='')
    user_status = Column(Integer, nullable=False, default=0)
    display_name = Column(String(250), nullable=False, default='')

    meta = relationship('UserMeta', back_populates='user', lazy='selectin',
                        order_by='UserMeta.umeta_id', cascade='all, delete-orphan')
    site_memberships = relationship('SiteUser', back_populates='user', cascade='all, delete-orphan')

    # ============================================================================
    # Class Methods - User Lookup
    # ============================================================================

    @classmethod
    def get_by_id(cls, session, user_id: int) -> Optional['User']:
        return session.get(cls, user_id)

    @classmethod
    def get_by_login(cls, session, user_login: str) -> Optional['User']:
        """
        Get a user by exact login match.

        Args:
            session: SQLAlchemy session
            user_login: Exact login name to search for

        Returns:
            User object if found, None otherwise

        Example:
            >>> user = User.get_by_login(session, 'admin')
        """
        return session.query(cls).filter(cls.user_login == user_login).first()

    @classmethod
    def get_by_email(cls, session, email: str) -> Optional['User']:
        """
        Get a user by the email stored on the users table.

        Example:
            >>> user = User.get_by_email(session, 'john.smith@example.com')
        """
        return session.query(cls).filter(cls.user_email == email).first()

    @classmethod
    def login_exists(cls, session, user_login: str) -> bool:
        """Check the live table (not the session identity map) for a login."""
        stmt = select(cls.user_id).where(cls.user_login == user_login).limit(1)
        return session.execute(stmt).first() is not None

    # ============================================================================
    # Profile access
    # ============================================================================

    def get_meta(self, key: str, default=None):
        for entry in self.meta:
            if entry.meta_key == key:
                return entry.meta_value
        return default

    def has_meta(self, key: str) -> bool:
        return any(entry.meta_key == key for entry in self.meta)

    def set_meta(self, key: str, value) -> None:
        """Update every row for key, or add one if the user has none."""
        value = '' if value is None else str(value)
        found = False
        for entry in self.meta:
            if entry.meta_key == key:
                entry.meta_value = value
                found = True
        if not found:
            self.meta.append(UserMeta(meta_key=key, meta_value=value))

    def has_prop(self, key: str) -> bool:
        """True for users-table columns and for metadata keys this user already has."""
        return key in self.PROFILE_COLUMNS or self.has_meta(key)

    def get(self, key: str):
        if key in self.PROFILE_COLUMNS:
            return getattr(self, key)
        return self.get_meta(key)

    def to_dict(self) -> Dict:
        """Snapshot of columns and metadata."""
        data = {column: getattr(self, column) for column in self.PROFILE_COLUMNS}
        data['ID'] = self.user_id
        for entry in self.meta:
            data.setdefault(entry.meta_key, entry.meta_value)
        return data

    def __repr__(self):
        return f"<User(id={self.user_id}, login='{self.user_login}')>"


#----------------------------------------------------------------------------
class UserMeta(Base):
    """Arbitrary key/value profile data for a user (usermeta table)."""
    __tablename__ = 'usermeta'

    __table_args__ = (
        Index('ix_usermeta_user_id', 'user_id'),
        Index('ix_usermeta_meta_key', 'meta_key'),
    )

    umeta_id = Column(BigInteger().with_variant(Integer, 'sqlite'), primary_key=True, autoincrement=True)
    user_id = Column(BigInteger().with_variant(Integer, 'sqlite'), ForeignKey('users.ID'), nullable=False, default=0)
    meta_key = Column(String(255))
    meta_value = Column(Text)

    user = relationship('User', back_populates='meta')

    def __repr__(self):
        return f"<UserMeta(user_id={self.user_id}, key='{self.meta_key}')>"
#-------------------------------------------------------------------------em-
