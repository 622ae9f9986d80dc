"""
Database Infrastructure

Table definitions, repositories and entity-to-DTO mappers for the
relational store.
"""
