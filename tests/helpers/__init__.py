from .event_helper import EventHistory

__all__ = ("EventHistory",)
