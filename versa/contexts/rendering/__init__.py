"""
Rendering Context

Responsibilities:
- Holds the session state a renderer works against (model + current version)
- Switches versions and hands out render models
- Describes per-version themes (class name, color)

Owns: ResumeSession, theme descriptors
Never: Produces markup or stylesheets (the external renderer does)
"""

from versa.contexts.rendering.session import ResumeSession
from versa.contexts.rendering.themes import hex_to_rgb, theme_classes, theme_descriptors

__all__ = [
    "ResumeSession",
    "hex_to_rgb",
    "theme_classes",
    "theme_descriptors",
]
