"""Base Models and Mixins"""

from sqlalchemy import Column, DateTime, func

from utilbill.database import Base
from utilbill.utils.time import get_utc_now

# Largest value an INTEGER key column holds on every supported backend
MAX_ID = 2**31 - 1


class BaseModel(Base):
    """
    Base model class for all tables.

    Primary keys are declared per table (user_id, bill_id, ...) so the
    column names match the public API payloads.
    """
    __abstract__ = True


class CreatedAtMixin:
    """
    Mixin for records stamped at insert time.

    Provides:
    - created_at timestamp (server default, also set client-side)
    """
    created_at = Column(DateTime, default=get_utc_now, server_default=func.now(), nullable=False)
