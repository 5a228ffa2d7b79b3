from .policies import Policies

__all__ = ["Policies"]
