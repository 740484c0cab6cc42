# display/style/__init__.py

from .definitions import StyleDefinitions
from .engine import StyleEngine, strip_ansi, visible_length


class DisplayStyle:
    """
    Style coordination layer built on top of the session's capabilities.

    Component Hierarchy:
    DisplayStyle → StyleEngine → StyleDefinitions
    """
    def __init__(self, capabilities):
        """
        Initialize the style system.

        Args:
            capabilities: Capabilities probed for the output stream
        """
        self.definitions = StyleDefinitions()
        self._engine = StyleEngine(
            definitions=self.definitions,
            ansi_enabled=capabilities.ansi
        )

    def __getattr__(self, name):
        """Delegate unknown attribute access to the style engine instance."""
        return getattr(self._engine, name)


__all__ = ['DisplayStyle', 'StyleDefinitions', 'StyleEngine', 'strip_ansi', 'visible_length']
