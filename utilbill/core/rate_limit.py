"""Rate Limiting"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from utilbill.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)

# Applied to write endpoints that touch money
PAYMENT_RATE_LIMIT = f"{settings.RATE_LIMIT_PER_MINUTE}/minute"
