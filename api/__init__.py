"""
Task Store HTTP API

Provides the REST surface over the in-memory task store:
- Task CRUD under /api/tasks
- Health check at /api/health
"""

__version__ = "1.0.0"
