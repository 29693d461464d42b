"""
Wishlist service orchestrator.

Each user owns at most one wishlist, created on the first add.

Dependencies: backend.boundary.db.CRUD
System role: Saved-for-later use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.course_crud import course_crud
from backend.boundary.db.CRUD.wishlist_crud import wishlist_crud
from backend.boundary.db.models.user_model import UserModel
from backend.boundary.db.models.wishlist_model import WishlistModel
from backend.core.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


class WishlistService:
    """Wishlist service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize wishlist service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def get_wishlist(self, user: UserModel) -> WishlistModel | None:
        """Get the caller's wishlist, None if they never saved a course."""
        return await wishlist_crud.get_by_user(self.db, user.id)

    async def add_course(self, user: UserModel, course_id: UUID) -> WishlistModel:
        """
        Save a course to the caller's wishlist.

        Returns:
            WishlistModel: Updated wishlist with courses loaded

        Raises:
            NotFoundError: If course not found
            ConflictError: Course already saved
        """
        course = await course_crud.get_by_id(self.db, course_id)
        if not course:
            raise NotFoundError("Course not found", resource_id=course_id)

        wishlist = await wishlist_crud.get_by_user(self.db, user.id)
        if wishlist is None:
            await wishlist_crud.create(self.db, user_id=user.id, courses=[course])
        else:
            if any(saved.id == course_id for saved in wishlist.courses):
                raise ConflictError("Course already in wishlist", details={"course_id": str(course_id)})
            wishlist.courses.append(course)
            await wishlist_crud.save(self.db, wishlist)

        logger.info("Course added to wishlist", extra={"user_id": str(user.id), "course_id": str(course_id)})
        return await wishlist_crud.get_by_user(self.db, user.id, populate_existing=True)

    async def remove_course(self, user: UserModel, course_id: UUID) -> None:
        """
        Remove a course from the caller's wishlist.

        Raises:
            NotFoundError: Course not in the wishlist
        """
        wishlist = await wishlist_crud.get_by_user(self.db, user.id)
        saved = None
        if wishlist is not None:
            saved = next((course for course in wishlist.courses if course.id == course_id), None)
        if saved is None:
            raise NotFoundError("Course not in wishlist", resource_id=course_id)

        wishlist.courses.remove(saved)
        await wishlist_crud.save(self.db, wishlist)
        logger.info("Course removed from wishlist", extra={"user_id": str(user.id), "course_id": str(course_id)})

    async def is_in_wishlist(self, user: UserModel, course_id: UUID) -> bool:
        """Check whether a course is in the caller's wishlist."""
        return await wishlist_crud.contains(self.db, user.id, course_id)

    async def clear(self, user: UserModel) -> int | None:
        """
        Empty the caller's wishlist.

        Returns:
            Number of courses removed, or None if the user has no wishlist
        """
        wishlist = await wishlist_crud.get_by_user(self.db, user.id)
        if wishlist is None:
            return None

        count = len(wishlist.courses)
        wishlist.courses.clear()
        await wishlist_crud.save(self.db, wishlist)
        logger.info("Wishlist cleared", extra={"user_id": str(user.id), "count": count})
        return count
