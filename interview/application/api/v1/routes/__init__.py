from interview.application.api.v1.routes import experiences, health

__all__ = ["experiences", "health"]
