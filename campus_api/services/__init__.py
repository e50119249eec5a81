"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
A single generic CrudService implements the resource contract; the entity
modules only bind it to a repository and a response schema.
"""
