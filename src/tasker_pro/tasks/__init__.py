"""
Task subsystem.

Components:
- task_models.py: data structures (TaskItem, AddResult)
- task_service.py: in-memory task registry
- task_api.py: small high-level helpers acting on the current user
"""
