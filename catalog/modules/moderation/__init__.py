from .service import MODERATION_TARGETS, ModerationService

__all__ = ["MODERATION_TARGETS", "ModerationService"]
