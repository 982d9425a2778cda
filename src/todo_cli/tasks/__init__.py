"""
Task subsystem.

Components:
- errors.py: failures that end an invocation (TodoError and subclasses)
- task_models.py: data structures (Task, TaskList)
- task_store.py: JSON file storage (initialize/load/save)
"""
