"""
Task subsystem.

Components:
- task_models.py: data structures (Task)
- task_store.py: ordered in-memory store + id assignment
- task_file.py: JSON load/save of the store at the well-known path
- errors.py: exception types raised by the store and the file adapter
"""
