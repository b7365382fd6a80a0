from interview.util.di.base import Provider

__all__ = ["Provider"]
