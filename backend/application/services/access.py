"""
Ownership and role rules shared by the authoring services.

Dependencies: backend.boundary.db.models, backend.core.exceptions
System role: Authorization predicates for course-scoped resources
"""

from backend.boundary.db.models.course_model import CourseModel
from backend.boundary.db.models.user_model import UserModel, UserRole
from backend.core.exceptions import ForbiddenError


def is_admin(user: UserModel | None) -> bool:
    """True when the user holds the admin role."""
    return user is not None and user.role == UserRole.ADMIN


def can_manage_course(course: CourseModel, user: UserModel | None) -> bool:
    """
    Whether ``user`` may author or view drafts of ``course``.

    Course instructors and admins may; anonymous callers never can.
    """
    if user is None:
        return False
    return course.instructor_id == user.id or is_admin(user)


def ensure_can_manage_course(course: CourseModel, user: UserModel | None, message: str) -> None:
    """
    Raise unless ``user`` may manage ``course``.

    Raises:
        ForbiddenError: With ``message`` when the check fails
    """
    if not can_manage_course(course, user):
        raise ForbiddenError(message, details={"course_id": str(course.id)})


def ensure_course_visible(course: CourseModel, user: UserModel | None) -> None:
    """
    Raise if ``course`` is an unpublished draft the caller may not see.

    Raises:
        ForbiddenError: Draft course and caller is neither instructor nor admin
    """
    if not course.published and not can_manage_course(course, user):
        raise ForbiddenError("Unauthorized access", details={"course_id": str(course.id)})
