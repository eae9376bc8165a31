from seyali.server.models.user import User

__all__ = ["User"]
