"""Persistence adapters."""

from apps.social.infrastructure.persistence_postgres.adapters.posts_gateway_sqla import (
    SqlaPostsGateway,
)
from apps.social.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)
from apps.social.infrastructure.persistence_postgres.adapters.users_gateway_sqla import (
    SqlaUsersGateway,
)

__all__ = ["SqlaPostsGateway", "SqlaTransactionManager", "SqlaUsersGateway"]
