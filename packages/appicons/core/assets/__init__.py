"""Asset generation pipeline.

Spec catalog, spec resolution and the orchestrator that renders, composes
and writes every icon, splash screen and favicon for a request.
"""
