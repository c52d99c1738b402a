"""ORM Mappings.

도메인 엔티티와 DB 테이블의 매핑을 정의합니다.
"""

from apps.social.infrastructure.persistence_postgres.mappings.posts import (
    posts_table,
    start_posts_mapper,
)
from apps.social.infrastructure.persistence_postgres.mappings.users import (
    start_users_mapper,
    users_table,
)


def start_all_mappers() -> None:
    """모든 매퍼 시작."""
    start_users_mapper()
    start_posts_mapper()


__all__ = [
    "posts_table",
    "users_table",
    "start_posts_mapper",
    "start_users_mapper",
    "start_all_mappers",
]
