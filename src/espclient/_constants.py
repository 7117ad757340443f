"""Internal constants shared across the library."""

BASE_URL = "http://localhost:8080"
API_ROOT = "/api/v1.0"
USER_AGENT = "espclient/1"

STUDENTS_RESOURCE = "students"
COURSES_RESOURCE = "courses"

# Characters that would turn a resource name into a sub-path or a query.
_FORBIDDEN_RESOURCE_CHARS = frozenset("/?#")


def is_valid_resource_name(resource: str) -> bool:
    """Return ``True`` when *resource* is a single, non-empty path segment."""
    stripped = resource.strip()
    if not stripped or stripped != resource:
        return False
    return not any(ch in _FORBIDDEN_RESOURCE_CHARS for ch in resource)
