from .customer_factory import CustomerDetails, CustomerFactory

__all__ = ["CustomerDetails", "CustomerFactory"]
