"""
VERSA - Versioned Résumé Synthesis & Assembly

Turns one versionless résumé profile plus a set of named presentation versions
into validated, render-ready models, one per version.

Architecture:
- Intake Context: Document loading and schema validation
- Templating Context: Merging profile and versions, per-version projection
- Rendering Context: Session control and theming hand-off to the renderer
"""

__version__ = "0.1.0"
