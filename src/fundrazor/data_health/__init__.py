"""Data-health report over the donor database.

Components:
- report: pure scoring of a person snapshot plus aggregate counts
- repository: the read-only queries that gather those inputs
- service: DataHealthService wiring the two, with an injectable clock
- schemas: DataHealthReport and its camelCase sub-models
"""
