from .entity import Review
from .factory import ReviewDetails, ReviewFactory
from .repository import ReviewRepository
from .value_object import Rating, ReviewId

__all__ = [
    "Rating",
    "Review",
    "ReviewDetails",
    "ReviewFactory",
    "ReviewId",
    "ReviewRepository",
]
