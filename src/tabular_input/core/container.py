"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from ..binding import FormBinding
from ..columns import ColumnRegistry, default_column_registry
from ..widget import TabularInput, WidgetOptions
from .config import Settings, get_settings
from .logging_config import configure_logging


class WidgetFactory:
    """Builds widgets sharing one column registry and settings."""

    def __init__(self, column_registry: ColumnRegistry, settings: Settings) -> None:
        self.column_registry = column_registry
        self.settings = settings

    def create(self, options: WidgetOptions, binding: FormBinding | None = None) -> TabularInput:
        return TabularInput(
            options,
            binding=binding,
            column_registry=self.column_registry,
            settings=self.settings,
        )


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide settings (environment unless given explicitly)."""
        return self.settings or get_settings()

    @singleton
    @provider
    def provide_column_registry(self) -> ColumnRegistry:
        """Provide column registry singleton with the built-in kinds."""
        return default_column_registry()

    @singleton
    @provider
    def provide_widget_factory(
        self, column_registry: ColumnRegistry, settings: Settings
    ) -> WidgetFactory:
        """Provide widget factory with all dependencies."""
        return WidgetFactory(column_registry, settings)


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector; logging follows the provided Settings."""
    injector = Injector([CoreModule(settings)])
    configure_logging(injector.get(Settings))
    return injector
