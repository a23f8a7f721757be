from fastapi import Depends, status
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from econova.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from econova.api.error import ClientError
from econova.app.services.unit_of_work import UnitOfWork
from econova.app.use_cases.tenants import LoadTenantContextUseCase, TenantContext

# Registers every table on SQLModel.metadata
import econova.domain.entities  # noqa: F401

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def init_db(bind=None):
    """Create all tables on the given engine (defaults to the configured one)."""
    async with (bind or engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_tenant_context(
    slug: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> TenantContext:
    """
    Dependency resolving the {slug} path parameter to a TenantContext.

    Raises:
        ClientError: 404 TENANT_NOT_FOUND before the route body runs, so no
        waste query is ever issued for an unresolved tenant
    """
    result = await LoadTenantContextUseCase(uow).execute(slug)
    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
    return result.value
