from .caller import Caller

__all__ = ["Caller"]
