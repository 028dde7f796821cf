#-------------------------------------------------------------------------bh-
#-------------------------------------------------------------------------eh-

from datetime import datetime
from typing import List, Optional, Dict, Set
from sqlalchemy import (
    Column, Integer, BigInteger, String, DateTime, Text,
    ForeignKey, Index, select, update
)
from sqlalchemy.orm import relationship, declarative_base, Session


#-------------------------------------------------------------------------bm-
Base = declarative_base()

# Format the CMS uses for DATETIME values passed around as text
DATETIME_FORMAT = '%Y-%m-%d %H:%M:%S'


def parse_datetime(value) -> Optional[datetime]:
    """Accept either a datetime or text in DATETIME_FORMAT."""
    if value is None or isinstance(value, datetime):
        return value
    return datetime.strptime(value, DATETIME_FORMAT)


class SessionMixin:
    @property
    def session(self) -> Session:
        return Session.object_session(self)
#-------------------------------------------------------------------------em-
