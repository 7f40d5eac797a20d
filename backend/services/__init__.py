"""
Service layer: registration workflow, request validation and collaborator interfaces.
"""
