from .datetime_utils import now_utc

__all__ = ['now_utc']
