from fluentsql.utils import logging

__all__ = ("logging",)
