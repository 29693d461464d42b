"""
Course service orchestrator.

Coordinates course lifecycle operations: catalogue browsing, authoring,
publishing and deletion.

Dependencies: backend.boundary.db.CRUD, backend.boundary.db.models
System role: Course use case orchestration
"""

import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.access import ensure_can_manage_course, ensure_course_visible
from backend.boundary.db.CRUD.category_crud import category_crud
from backend.boundary.db.CRUD.course_crud import course_crud
from backend.boundary.db.models.course_model import CourseLevel, CourseModel
from backend.boundary.db.models.user_model import UserModel
from backend.core.exceptions import NotFoundError
from backend.core.slugs import next_available_slug, slugify

logger = logging.getLogger(__name__)

# Columns an update may explicitly clear with null.
_NULLABLE_FIELDS = {"description", "thumbnail", "category_id"}


class CourseService:
    """Course service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize course service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _load(self, course_id: UUID, populate_existing: bool = False) -> CourseModel:
        course = await course_crud.get_with_relations(
            self.db, course_id, populate_existing=populate_existing
        )
        if not course:
            raise NotFoundError("Course not found", resource_id=course_id)
        return course

    async def _ensure_category(self, category_id: UUID | None) -> None:
        if category_id is not None and not await category_crud.exists(self.db, category_id):
            raise NotFoundError("Category not found", resource_id=category_id)

    async def _unique_slug(self, title: str) -> str:
        base = slugify(title)
        taken = await course_crud.get_slugs_like(self.db, base)
        return next_available_slug(base, taken)

    async def list_published(
        self,
        category_id: UUID | None = None,
        level: CourseLevel | None = None,
        search: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[Sequence[CourseModel], int]:
        """
        Browse the public catalogue.

        Args:
            category_id: Restrict to one category
            level: Restrict to one difficulty level
            search: Case-insensitive title substring
            limit: Page size
            offset: Number of courses to skip

        Returns:
            tuple: (courses on this page, total matching courses)
        """
        courses = await course_crud.get_published(
            self.db,
            category_id=category_id,
            level=level,
            search=search,
            limit=limit,
            offset=offset,
        )
        total = await course_crud.count_published(
            self.db, category_id=category_id, level=level, search=search
        )
        return courses, total

    async def list_instructor_courses(self, user: UserModel) -> Sequence[CourseModel]:
        """Get every course the user teaches, drafts included."""
        return await course_crud.get_by_instructor(self.db, user.id)

    async def get_course(self, course_id: UUID, user: UserModel | None = None) -> CourseModel:
        """
        Get course by ID.

        Args:
            course_id: Course UUID
            user: Caller, None when anonymous

        Returns:
            CourseModel: Course with instructor and category loaded

        Raises:
            NotFoundError: If course not found
            ForbiddenError: Draft course and caller is not its instructor or an admin
        """
        course = await self._load(course_id)
        ensure_course_visible(course, user)
        return course

    async def create_course(
        self,
        user: UserModel,
        title: str,
        description: str | None = None,
        thumbnail: str | None = None,
        price: float = 0,
        is_free: bool | None = None,
        level: CourseLevel = CourseLevel.BEGINNER,
        category_id: UUID | None = None,
    ) -> CourseModel:
        """
        Create a draft course owned by ``user``.

        Returns:
            CourseModel: Created course with relations loaded

        Raises:
            NotFoundError: Unknown category
        """
        await self._ensure_category(category_id)

        course = await course_crud.create(
            self.db,
            title=title.strip(),
            slug=await self._unique_slug(title),
            description=description,
            thumbnail=thumbnail,
            price=price,
            is_free=(price == 0) if is_free is None else is_free,
            level=level,
            published=False,
            instructor_id=user.id,
            category_id=category_id,
        )
        logger.info(
            "Course created",
            extra={"course_id": str(course.id), "instructor_id": str(user.id)},
        )
        return await self._load(course.id, populate_existing=True)

    async def update_course(
        self,
        course_id: UUID,
        user: UserModel,
        updates: dict[str, Any],
    ) -> CourseModel:
        """
        Apply a partial update.

        Args:
            course_id: Course UUID
            user: Caller
            updates: Field values to change (only keys present are applied)

        Raises:
            NotFoundError: Course or new category not found
            ForbiddenError: Caller is not the instructor or an admin
        """
        course = await self._load(course_id)
        ensure_can_manage_course(course, user, "Only the course instructor can update this course")

        updates = {
            field: value
            for field, value in updates.items()
            if value is not None or field in _NULLABLE_FIELDS
        }

        if "price" in updates and "is_free" not in updates:
            updates["is_free"] = updates["price"] == 0
        if "category_id" in updates:
            await self._ensure_category(updates["category_id"])
        if "title" in updates:
            updates["title"] = updates["title"].strip()
            if updates["title"] != course.title:
                course.slug = await self._unique_slug(updates["title"])

        for field, value in updates.items():
            setattr(course, field, value)

        await course_crud.save(self.db, course)
        logger.info(
            "Course updated",
            extra={"course_id": str(course_id), "updates": list(updates.keys())},
        )
        return await self._load(course_id, populate_existing=True)

    async def set_published(self, course_id: UUID, user: UserModel, published: bool) -> CourseModel:
        """
        Publish or unpublish a course.

        Raises:
            NotFoundError: If course not found
            ForbiddenError: Caller is not the instructor or an admin
        """
        course = await self._load(course_id)
        ensure_can_manage_course(course, user, "Only the course instructor can publish this course")

        course.published = published
        await course_crud.save(self.db, course)
        logger.info("Course publish state changed", extra={"course_id": str(course_id), "published": published})
        return course

    async def delete_course(self, course_id: UUID, user: UserModel) -> None:
        """
        Delete course with its sections, lectures and enrollments.

        Raises:
            NotFoundError: If course not found
            ForbiddenError: Caller is not the instructor or an admin
        """
        course = await self._load(course_id)
        ensure_can_manage_course(course, user, "Only the course instructor can delete this course")

        await course_crud.delete(self.db, course)
        logger.info("Course deleted", extra={"course_id": str(course_id)})
