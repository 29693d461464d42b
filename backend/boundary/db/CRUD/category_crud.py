"""
Category CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Catalogue taxonomy persistence operations
"""

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.models.category_model import CategoryModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class CategoryCRUD(BaseCRUD[CategoryModel]):
    """CRUD operations for CategoryModel."""

    def __init__(self) -> None:
        """Initialize CategoryCRUD with CategoryModel."""
        super().__init__(CategoryModel)

    async def get_all_by_name(self, session: AsyncSession) -> Sequence[CategoryModel]:
        """Retrieve every category sorted alphabetically."""
        stmt = select(CategoryModel).order_by(CategoryModel.name)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_name(self, session: AsyncSession, name: str) -> CategoryModel | None:
        """
        Retrieve a category by name, case-insensitively.

        Args:
            session: Async database session
            name: Category name

        Returns:
            CategoryModel if found, None otherwise
        """
        stmt = select(CategoryModel).where(func.lower(CategoryModel.name) == name.lower())
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_slug(self, session: AsyncSession, slug: str) -> CategoryModel | None:
        """Retrieve a category by slug."""
        stmt = select(CategoryModel).where(CategoryModel.slug == slug)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


category_crud = CategoryCRUD()
