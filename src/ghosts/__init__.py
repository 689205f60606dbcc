"""ghosts: resolves GitHub domains and publishes hosts/RouterOS lists."""

__version__ = "0.3.0"
