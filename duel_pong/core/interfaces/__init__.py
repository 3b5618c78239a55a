"""
Collaborator protocols for the Duel Pong engine
"""

from duel_pong.core.interfaces.display import DisplayProtocol
from duel_pong.core.interfaces.scheduler import FrameCallback
from duel_pong.core.interfaces.scheduler import SchedulerProtocol

__all__ = ["DisplayProtocol", "SchedulerProtocol", "FrameCallback"]
