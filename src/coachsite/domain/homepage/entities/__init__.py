from coachsite.domain.homepage.entities.banner import Banner
from coachsite.domain.homepage.entities.testimonial import Testimonial

__all__ = [
    "Banner",
    "Testimonial",
]
