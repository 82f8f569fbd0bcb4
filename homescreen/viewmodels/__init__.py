from .home_vm import HomeViewModel

__all__ = ["HomeViewModel"]
