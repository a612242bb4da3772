"""Bot strategies for Hearts."""

from .base import BotStrategy, make_play
from .basic import BasicStrategy

__all__ = ["BotStrategy", "BasicStrategy", "make_play"]
