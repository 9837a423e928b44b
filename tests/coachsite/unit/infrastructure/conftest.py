from tests.shared.fixtures.database import db_session

__all__ = ["db_session"]
