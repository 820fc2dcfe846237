from .hotel import Hotel
from .tour_package import TourPackage

__all__ = ["Hotel", "TourPackage"]
