from coachsite.application.commands.homepage.banner_commands import (
    CreateBannerCommand,
    DeleteBannerCommand,
    UpdateBannerCommand,
)
from coachsite.application.commands.homepage.testimonial_commands import (
    CreateTestimonialCommand,
    DeleteTestimonialCommand,
    UpdateTestimonialCommand,
)

__all__ = [
    "CreateBannerCommand",
    "CreateTestimonialCommand",
    "DeleteBannerCommand",
    "DeleteTestimonialCommand",
    "UpdateBannerCommand",
    "UpdateTestimonialCommand",
]
