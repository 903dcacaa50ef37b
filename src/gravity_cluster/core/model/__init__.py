from .bodies import Body, BodyHandle, BodyRole, BodyStore, Vector

__all__ = [
    "Body",
    "BodyHandle",
    "BodyRole",
    "BodyStore",
    "Vector",
]
