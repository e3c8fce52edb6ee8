from .orb import OrbClient

__all__ = ["OrbClient"]
