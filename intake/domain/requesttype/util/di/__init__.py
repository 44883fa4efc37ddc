from intake.domain.requesttype.util.di.provider import RequestTypeProvider

__all__ = ["RequestTypeProvider"]
