"""Schema helpers shared by the API lifespan, the CLI and tests."""

from sqlalchemy.ext.asyncio import AsyncEngine


async def create_tables(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    # Register every model on the shared metadata before create_all.
    from coachsite.infrastructure.persistence.sqlalchemy.models import Base
    from coachsite_identity.infrastructure.persistence.sqlalchemy.models import (  # NOQA: F401
        UserModel,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
