# parcel_match/application/__init__.py

"""Application layer: normalization, similarity scoring and matching"""
