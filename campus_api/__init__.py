"""캠퍼스 관리 API 패키지.

Campus Admin API package — institutes, departments, study directions,
applicants, buildings and dormitories behind a uniform CRUD contract.
"""
