"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskCollection)
- task_store.py: pure operations over a collection (add/list/done/toggle/delete/clear)
- task_codec.py: JSON persisted representation
- task_api.py: session helpers that apply an operation to AppState and persist
"""
