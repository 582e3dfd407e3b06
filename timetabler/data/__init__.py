from .curriculum import Demand, resolve_curriculum
from .index import EntityIndex
from .loader import constraints_from_dict, load_constraints
from .registry import ResourceTracker

__all__ = [
    "Demand",
    "EntityIndex",
    "ResourceTracker",
    "constraints_from_dict",
    "load_constraints",
    "resolve_curriculum",
]
