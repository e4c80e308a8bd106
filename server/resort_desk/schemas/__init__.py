"""Pydantic schemas for request/response validation."""

from .accommodation import *  # noqa: F403
from .common import *  # noqa: F403
from .dashboard import *  # noqa: F403
from .health import *  # noqa: F403
from .profile import *  # noqa: F403
from .reservation import *  # noqa: F403
from .sale import *  # noqa: F403
from .ticket import *  # noqa: F403
