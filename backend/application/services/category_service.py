"""
Category service orchestrator.

Coordinates category lifecycle operations for catalogue administrators.

Dependencies: backend.boundary.db.CRUD, backend.core.slugs
System role: Category use case orchestration
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.category_crud import category_crud
from backend.boundary.db.models.category_model import CategoryModel
from backend.core.exceptions import ConflictError, NotFoundError
from backend.core.slugs import slugify

logger = logging.getLogger(__name__)


class CategoryService:
    """Category service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize category service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _ensure_name_available(self, name: str, exclude_id: UUID | None = None) -> str:
        """Return the slug for ``name`` after checking neither name nor slug is taken."""
        slug = slugify(name)
        for existing in (
            await category_crud.get_by_name(self.db, name),
            await category_crud.get_by_slug(self.db, slug),
        ):
            if existing and existing.id != exclude_id:
                raise ConflictError("Category already exists", details={"name": name})
        return slug

    async def list_categories(self) -> Sequence[CategoryModel]:
        """Get all categories sorted by name."""
        return await category_crud.get_all_by_name(self.db)

    async def get_category(self, category_id: UUID) -> CategoryModel:
        """
        Get category by ID.

        Raises:
            NotFoundError: If category not found
        """
        category = await category_crud.get_by_id(self.db, category_id)
        if not category:
            raise NotFoundError("Category not found", resource_id=category_id)
        return category

    async def create_category(self, name: str, description: str | None = None) -> CategoryModel:
        """
        Create a category.

        Args:
            name: Category name
            description: Optional description

        Returns:
            CategoryModel: Created category

        Raises:
            ConflictError: Name or derived slug already used
        """
        name = name.strip()
        slug = await self._ensure_name_available(name)
        category = await category_crud.create(
            self.db, name=name, slug=slug, description=description
        )
        logger.info("Category created", extra={"category_id": str(category.id), "category_name": name})
        return category

    async def update_category(
        self,
        category_id: UUID,
        name: str | None = None,
        description: str | None = None,
    ) -> CategoryModel:
        """
        Update category name and/or description; renaming re-derives the slug.

        Raises:
            NotFoundError: If category not found
            ConflictError: New name collides with another category
        """
        category = await self.get_category(category_id)

        if name is not None and name.strip() != category.name:
            name = name.strip()
            category.slug = await self._ensure_name_available(name, exclude_id=category.id)
            category.name = name
        if description is not None:
            category.description = description

        await category_crud.save(self.db, category)
        logger.info("Category updated", extra={"category_id": str(category_id)})
        return category

    async def delete_category(self, category_id: UUID) -> None:
        """
        Delete category; its courses become uncategorised.

        Raises:
            NotFoundError: If category not found
        """
        category = await self.get_category(category_id)
        await category_crud.delete(self.db, category)
        logger.info("Category deleted", extra={"category_id": str(category_id)})
