"""Use cases for managing membership plans."""

from .create_plan import create_plan
from .get_plan import get_plan
from .list_plans import list_plans
from .update_plan import update_plan

__all__ = [
    "create_plan",
    "get_plan",
    "list_plans",
    "update_plan",
]
