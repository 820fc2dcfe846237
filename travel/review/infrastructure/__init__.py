from .dynamodb_review_repository import DynamoDBReviewRepository, review_key

__all__ = ["DynamoDBReviewRepository", "review_key"]
