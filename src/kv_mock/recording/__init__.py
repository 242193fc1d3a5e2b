from .interactions import Interaction, InteractionLog

__all__ = ["Interaction", "InteractionLog"]
