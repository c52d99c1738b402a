"""SQLAlchemy Mapper Registry.

공용 Imperative Mapping Registry. 모든 매핑 파일에서 이 registry와 metadata를 공유합니다.
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import registry

metadata = MetaData()
mapper_registry = registry(metadata=metadata)
