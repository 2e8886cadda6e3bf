"""
parcelstore - SQLite persistence for parcel (shipment) records.

It provides:
- A Parcel model and the known ParcelStatus codes
- ParcelStore: add, get, get_by_client, set_address, set_status, delete
- ParcelDB: a connection owner configured from YAML
- Console and JSON reports over lists of parcels

Example usage:
    from parcelstore import Parcel, ParcelDB, ParcelStatus

    with ParcelDB("parcels.db") as db:
        number = db.store.add(Parcel(client=1000, address="test"))
        db.store.set_status(number, ParcelStatus.SENT)
"""

from parcelstore.errors import ParcelNotFoundError, ParcelStoreError
from parcelstore.schema import Parcel, ParcelStatus, StoreConfig, load_config
from parcelstore.store import ParcelDB, ParcelStore

__version__ = "0.1.0"
__author__ = "parcelstore Contributors"

__all__ = [
    "__version__",
    "__author__",
    "Parcel",
    "ParcelDB",
    "ParcelNotFoundError",
    "ParcelStatus",
    "ParcelStore",
    "ParcelStoreError",
    "StoreConfig",
    "load_config",
]
