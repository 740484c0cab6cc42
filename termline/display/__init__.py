# display/__init__.py

from .capabilities import Capabilities, detect_capabilities
from .terminal import DisplayTerminal, Direction
from .style import DisplayStyle, strip_ansi, visible_length
from .live import LiveBlock, LiveState


class Display:
    """
    Coordinates terminal display components in a hierarchical structure.

    Component Hierarchy:
    Capabilities (probe) → DisplayTerminal → DisplayStyle → LiveBlock
    """
    def __init__(self, config, logger):
        """Probe the output stream once, then build components in dependency order."""
        self.capabilities = detect_capabilities(
            config.stream,
            interactive=config.interactive,
            ansi=config.ansi
        )
        logger.debug(
            f"Capabilities: interactive={self.capabilities.interactive} "
            f"ansi={self.capabilities.ansi}"
        )
        self.terminal = DisplayTerminal(self.capabilities, stream=config.stream)
        self.style = DisplayStyle(self.capabilities)
        self.live = LiveBlock(terminal=self.terminal, logger=logger)


__all__ = [
    'Display', 'Capabilities', 'detect_capabilities', 'DisplayTerminal', 'Direction',
    'DisplayStyle', 'LiveBlock', 'LiveState', 'strip_ansi', 'visible_length',
]
