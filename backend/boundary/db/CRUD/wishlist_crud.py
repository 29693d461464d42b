"""
Wishlist CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Saved-for-later course persistence operations
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backend.boundary.db.models.course_model import CourseModel
from backend.boundary.db.models.wishlist_model import WishlistModel, wishlist_courses
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class WishlistCRUD(BaseCRUD[WishlistModel]):
    """CRUD operations for WishlistModel."""

    def __init__(self) -> None:
        """Initialize WishlistCRUD with WishlistModel."""
        super().__init__(WishlistModel)

    async def get_by_user(
        self,
        session: AsyncSession,
        user_id: UUID,
        populate_existing: bool = False,
    ) -> WishlistModel | None:
        """
        Retrieve a user's wishlist with courses, instructors and categories loaded.

        Args:
            session: Async database session
            user_id: Owner UUID
            populate_existing: Reload a wishlist already in the session after changes

        Returns:
            WishlistModel if the user has one, None otherwise
        """
        stmt = (
            select(WishlistModel)
            .where(WishlistModel.user_id == user_id)
            .options(
                selectinload(WishlistModel.courses).selectinload(CourseModel.instructor),
                selectinload(WishlistModel.courses).selectinload(CourseModel.category),
            )
        )
        if populate_existing:
            stmt = stmt.execution_options(populate_existing=True)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def contains(self, session: AsyncSession, user_id: UUID, course_id: UUID) -> bool:
        """Check whether a course is in a user's wishlist."""
        stmt = (
            select(wishlist_courses.c.course_id)
            .join(WishlistModel, WishlistModel.id == wishlist_courses.c.wishlist_id)
            .where(
                WishlistModel.user_id == user_id,
                wishlist_courses.c.course_id == course_id,
            )
        )
        result = await session.execute(stmt)
        return result.first() is not None


wishlist_crud = WishlistCRUD()
