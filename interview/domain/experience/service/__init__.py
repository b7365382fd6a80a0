from interview.domain.experience.service.experience import ExperienceService

__all__ = ["ExperienceService"]
