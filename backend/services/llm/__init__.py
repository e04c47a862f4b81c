from .client import complete, build_messages

__all__ = ['complete', 'build_messages']
