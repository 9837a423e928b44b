from coachsite_identity.application.services.otp_service import OtpService

__all__ = ["OtpService"]
