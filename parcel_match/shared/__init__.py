# parcel_match/shared/__init__.py

"""Shared utilities and mixins used across layers"""
