from .dedalus_chat_model import DedalusChatModel
from .generator import RemoteGenerationError, RemoteWorkoutGenerator

__all__ = ["DedalusChatModel", "RemoteGenerationError", "RemoteWorkoutGenerator"]
