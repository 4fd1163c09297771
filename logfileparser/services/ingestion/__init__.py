from .service import LogIngestionService

__all__ = ["LogIngestionService"]
