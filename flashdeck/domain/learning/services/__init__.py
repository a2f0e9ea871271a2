from .study_session import CardFace, StudySession, seeded_shuffle

__all__ = ["CardFace", "StudySession", "seeded_shuffle"]
