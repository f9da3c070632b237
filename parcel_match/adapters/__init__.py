# parcel_match/adapters/__init__.py

"""Adapters exposing parcel_match to the outside world"""
