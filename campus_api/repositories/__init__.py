"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Every entity repository extends BaseRepository; none adds queries of its own.
"""
