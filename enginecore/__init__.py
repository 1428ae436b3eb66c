"""Core runtime pieces of a small game engine: 3D math, containers, strings, names, delegates, serialisation and an object registry."""

__version__ = "0.1.0"