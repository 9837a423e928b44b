from coachsite.infrastructure.media.cloudinary_storage import CloudinaryMediaStorage

__all__ = ["CloudinaryMediaStorage"]
