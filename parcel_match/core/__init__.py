# parcel_match/core/__init__.py

"""Core domain layer: entities, enums and type definitions"""
