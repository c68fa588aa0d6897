"""Stored Models — item shapes persisted in DynamoDB.

Invariants:
    - Models know their attribute names and item conversion, nothing about boto3
"""
