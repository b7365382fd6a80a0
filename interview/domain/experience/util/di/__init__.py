from interview.domain.experience.util.di.provider import ExperienceProvider

__all__ = ["ExperienceProvider"]
