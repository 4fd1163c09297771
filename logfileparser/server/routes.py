"""Central route registration."""
from litestar.types import ControllerRouterHandler

from logfileparser.api.v1.entries_controller import EntryController
from logfileparser.api.v1.settings import read_settings
from logfileparser.api.v1.stats import stats

def get_route_handlers() -> list[ControllerRouterHandler]:
    """Get all route handlers for the application."""
    return [
        EntryController,
        read_settings,
        stats,
    ]
