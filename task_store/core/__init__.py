"""
Core module - The in-memory task store
"""

from .store import TaskStore, ID_PREFIX

__all__ = ['TaskStore', 'ID_PREFIX']
