from app.models.about import AboutContent
from app.models.blog import BlogPost
from app.models.booking import Booking
from app.models.contact import ContactMessage, NewsletterSubscriber
from app.models.destination import Destination
from app.models.menu import MenuItem
from app.models.review import Review
from app.models.tour import Itinerary, SavedTour, Tour, TourCategory

__all__ = [
    "AboutContent",
    "BlogPost",
    "Booking",
    "ContactMessage",
    "Destination",
    "Itinerary",
    "MenuItem",
    "NewsletterSubscriber",
    "Review",
    "SavedTour",
    "Tour",
    "TourCategory",
]
