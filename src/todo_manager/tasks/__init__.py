"""
Task subsystem.

Components:
- task_models.py: data structures (Task)
- errors.py: error kinds reported to the user
- task_store.py: in-memory ordered store, id assignment, capacity
- task_file.py: line-oriented file format, load/save
"""
