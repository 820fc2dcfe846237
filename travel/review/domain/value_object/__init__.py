from .rating import Rating
from .review_id import ReviewId

__all__ = ["Rating", "ReviewId"]
