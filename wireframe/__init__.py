"""Height-map wireframe viewer and supporting text, memory and I/O helpers."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "canvas",
    "chars",
    "geometry",
    "linkedlist",
    "lines",
    "mapfile",
    "memory",
    "numeric",
    "output",
    "strings",
]