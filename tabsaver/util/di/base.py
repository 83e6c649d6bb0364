from dishka import Provider as DishkaProvider
from dishka import from_context

from tabsaver.cli.util.paths import TabSaverPaths
from tabsaver.config import Config
from tabsaver.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for all providers. Uses the custom APP scope by default."""

    scope = Scope.APP


class ContextProvider(Provider):
    """Values handed to ``make_async_container`` as context."""

    config = from_context(provides=Config, scope=Scope.APP)
    paths = from_context(provides=TabSaverPaths, scope=Scope.APP)
