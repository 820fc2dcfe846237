from .review_factory import ReviewDetails, ReviewFactory

__all__ = ["ReviewDetails", "ReviewFactory"]
