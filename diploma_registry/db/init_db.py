from diploma_registry.db.base import Base
from diploma_registry.db.session import engine


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
