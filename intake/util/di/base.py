from dishka import Provider as DishkaProvider

from intake.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for all DI providers; factories default to the unit-of-work scope."""

    scope = Scope.UOW
