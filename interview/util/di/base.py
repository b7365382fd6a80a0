from dishka import Provider as DishkaProvider
from dishka import Scope


class Provider(DishkaProvider):
    """Base for all DI providers. Factories default to application scope."""

    scope = Scope.APP
