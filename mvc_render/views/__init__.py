"""Format renderers, page resolution and the dynamic view registry.

Each renderer writes one output format into a response writer; the dispatcher
picks the renderer and owns the terminal flush.
"""
