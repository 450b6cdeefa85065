from .repo import ParcelRepository, parse_parcel, read_parcel

__all__ = ["ParcelRepository", "parse_parcel", "read_parcel"]
