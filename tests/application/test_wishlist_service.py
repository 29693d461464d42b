"""
Test suite for WishlistService.
"""

import uuid

import pytest

from backend.application.services.wishlist_service import WishlistService
from backend.core.exceptions import ConflictError, NotFoundError


@pytest.fixture
def wishlist_service(test_async_db) -> WishlistService:
    return WishlistService(db=test_async_db)


class TestWishlistService:
    """Saving courses for later."""

    @pytest.mark.asyncio
    async def test_no_wishlist_until_first_add(self, wishlist_service: WishlistService, make_user) -> None:
        student = await make_user()

        assert await wishlist_service.get_wishlist(student) is None
        assert await wishlist_service.clear(student) is None

    @pytest.mark.asyncio
    async def test_add_creates_wishlist(self, wishlist_service: WishlistService, make_user, make_course) -> None:
        student = await make_user()
        course = await make_course(await make_user("instructor"))

        wishlist = await wishlist_service.add_course(student, course.id)

        assert wishlist.user_id == student.id
        assert [c.id for c in wishlist.courses] == [course.id]
        assert wishlist.courses[0].instructor is not None

    @pytest.mark.asyncio
    async def test_add_to_existing_wishlist(self, wishlist_service: WishlistService, make_user, make_course) -> None:
        student = await make_user()
        instructor = await make_user("instructor")
        first = await make_course(instructor)
        second = await make_course(instructor)

        await wishlist_service.add_course(student, first.id)
        wishlist = await wishlist_service.add_course(student, second.id)

        assert {c.id for c in wishlist.courses} == {first.id, second.id}

    @pytest.mark.asyncio
    async def test_add_duplicate(self, wishlist_service: WishlistService, make_user, make_course) -> None:
        student = await make_user()
        course = await make_course(await make_user("instructor"))
        await wishlist_service.add_course(student, course.id)

        with pytest.raises(ConflictError, match="Course already in wishlist"):
            await wishlist_service.add_course(student, course.id)

    @pytest.mark.asyncio
    async def test_add_missing_course(self, wishlist_service: WishlistService, make_user) -> None:
        with pytest.raises(NotFoundError, match="Course not found"):
            await wishlist_service.add_course(await make_user(), uuid.uuid4())

    @pytest.mark.asyncio
    async def test_remove(self, wishlist_service: WishlistService, make_user, make_course) -> None:
        student = await make_user()
        course = await make_course(await make_user("instructor"))
        await wishlist_service.add_course(student, course.id)

        await wishlist_service.remove_course(student, course.id)

        assert await wishlist_service.is_in_wishlist(student, course.id) is False
        with pytest.raises(NotFoundError, match="Course not in wishlist"):
            await wishlist_service.remove_course(student, course.id)

    @pytest.mark.asyncio
    async def test_remove_without_wishlist(self, wishlist_service: WishlistService, make_user) -> None:
        with pytest.raises(NotFoundError, match="Course not in wishlist"):
            await wishlist_service.remove_course(await make_user(), uuid.uuid4())

    @pytest.mark.asyncio
    async def test_clear_reports_count(self, wishlist_service: WishlistService, make_user, make_course) -> None:
        student = await make_user()
        instructor = await make_user("instructor")
        for _ in range(3):
            await wishlist_service.add_course(student, (await make_course(instructor)).id)

        assert await wishlist_service.clear(student) == 3
        assert await wishlist_service.clear(student) == 0
        assert (await wishlist_service.get_wishlist(student)).courses == []
