"""Financial analytics and simulation engine for the personal wealth dashboard.

The analytics live in ``wealth_engine.services`` as pure functions over plain
records; ``wealth_engine.main`` wraps them in a small FastAPI service.
"""

__version__ = "0.1.0"
